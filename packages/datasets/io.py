"""
Word-list file access.

Lists come from all sorts of places (spreadsheet exports, scraped pages), so
reading tolerates a UTF-8 byte-order mark and any line-ending style; the
lines are otherwise returned untouched for the lexicon rules to judge.
Writing always produces the canonical form: one uppercase word per line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from packages.engine.validation import normalize


def read_wordlist(p: Path | str) -> List[str]:
    """Raw lines of a word-list file. Raises FileNotFoundError if missing."""
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8-sig").splitlines()


def write_wordlist(words: Iterable[str], p: Path | str) -> str:
    """
    Write words uppercased, one per line with a trailing newline, creating
    parent directories. Returns the path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{normalize(w)}\n" for w in words)
    p.write_text(body, encoding="utf-8")
    return str(p)
