"""
The word list: an immutable master copy plus the live working set.

Loading rules (one token per line):
  - surrounding whitespace is stripped and letters are uppercased
  - blank lines are skipped silently
  - anything that is not exactly five letters A–Z is a MalformedLexiconEntry:
    logged, counted and skipped
  - duplicates collapse
  - if nothing survives, EmptyLexicon is raised

Typical use:
    lex = load_lexicon("packages/datasets/data/words_5.txt")
    lex.working.discard("CRANE")
    lex.restore()          # back to the full master list for the next puzzle
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Set, Tuple

from packages.engine.errors import EmptyLexicon, MalformedLexiconEntry
from packages.engine.validation import normalize, shape_problem
from .io import read_wordlist

log = logging.getLogger(__name__)


class Lexicon:
    def __init__(self, words: Iterable[str]):
        """
        Words are normalized like file lines; a malformed one raises
        MalformedLexiconEntry (use load_lexicon to skip bad lines instead).
        """
        self.master: FrozenSet[str] = frozenset(parse_entry(w) for w in words)
        if not self.master:
            raise EmptyLexicon("lexicon contains no valid words")
        self.working: Set[str] = set(self.master)

    def restore(self) -> None:
        """Replace the working set wholesale with a fresh copy of the master."""
        self.working = set(self.master)

    def __len__(self) -> int:
        return len(self.master)

    def __contains__(self, word: str) -> bool:
        return word in self.master

    def __repr__(self) -> str:
        return f"Lexicon(master={len(self.master)}, working={len(self.working)})"


def parse_entry(line: str) -> str:
    """
    Normalize one word-list line, or raise MalformedLexiconEntry.
    """
    problem = shape_problem(line)
    if problem:
        raise MalformedLexiconEntry(line, problem)
    return normalize(line)


def parse_entries(lines: Iterable[str]) -> Tuple[List[str], int]:
    """
    Returns:
      (valid words in first-seen order without duplicates, rejected line count)
    """
    words: List[str] = []
    seen: Set[str] = set()
    rejected = 0
    for line in lines:
        if not line.strip():
            continue
        try:
            w = parse_entry(line)
        except MalformedLexiconEntry as e:
            rejected += 1
            log.debug(str(e))
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)
    return words, rejected


def load_lexicon(path: Path | str) -> Lexicon:
    words, rejected = parse_entries(read_wordlist(path))
    if rejected:
        log.warning(f"{path}: skipped {rejected} malformed line(s)")
    if not words:
        raise EmptyLexicon(f"{path}: no valid five-letter words")
    log.info(f"loaded {len(words)} words from {path}")
    return Lexicon(words)
