"""
Candidate pruning from one round of feedback.

Given:
  - the working set of words still possible
  - the guess just played and its per-letter statuses
  - what is known so far this puzzle (greens by position, yellows)

Remove every word the feedback rules out, in place.

Repeated letters are the tricky part. Guessing "SEEDY" against "SCENT"
reports the first E as ABSENT and the second as CORRECT. If the ABSENT E were
treated as "no E anywhere", the secret itself would be thrown away. So all
five positions are scanned for greens and yellows BEFORE any position is
pruned, and an ABSENT letter only eliminates words when it is known not to
occur anywhere else:

  status   letter state                      removes words that...
  -------  --------------------------------  -----------------------------------
  CORRECT  -                                 don't have the letter at i
  PRESENT  -                                 have the letter at i, or lack it
  ABSENT   not placed, not known-present     contain the letter anywhere
  ABSENT   placed, not known-present         have it outside its placed slots
  ABSENT   known-present                     (nothing)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, MutableSet, Sequence, Set

from .errors import InvalidGuessRejected, NoCandidatesRemain
from .feedback import LetterStatus
from .validation import WORD_LENGTH

log = logging.getLogger(__name__)


@dataclass
class Knowledge:
    """Letter knowledge accumulated during one puzzle."""
    placements: Dict[str, Set[int]] = field(default_factory=dict)  # greens
    present: Set[str] = field(default_factory=set)                 # yellows

    def clear(self) -> None:
        self.placements.clear()
        self.present.clear()

    def clear_present(self) -> None:
        self.present.clear()


def check_round(guess: str, statuses: Sequence[LetterStatus]) -> None:
    if len(guess) != WORD_LENGTH or len(statuses) != WORD_LENGTH:
        raise ValueError(
            f"expected {WORD_LENGTH} letters and statuses, got {guess!r} / {len(statuses)}")
    if any(s is LetterStatus.INVALID for s in statuses):
        raise InvalidGuessRejected(guess)


def record_feedback(knowledge: Knowledge, guess: str, statuses: Sequence[LetterStatus]) -> None:
    """
    Look-ahead pass: note every green and yellow of this guess before any
    pruning happens.

    A known-present letter that comes back green with no yellow copy in the
    same guess is fully placed and leaves the known-present set.
    """
    greens: Set[str] = set()
    yellows: Set[str] = set()
    for i, (ch, st) in enumerate(zip(guess, statuses)):
        if st is LetterStatus.CORRECT:
            knowledge.placements.setdefault(ch, set()).add(i)
            greens.add(ch)
        elif st is LetterStatus.PRESENT:
            knowledge.present.add(ch)
            yellows.add(ch)
    knowledge.present -= greens - yellows


def _rules_out(word: str, i: int, ch: str, st: LetterStatus, knowledge: Knowledge) -> bool:
    if st is LetterStatus.CORRECT:
        return word[i] != ch
    if st is LetterStatus.PRESENT:
        return word[i] == ch or ch not in word
    # ABSENT
    if ch in knowledge.present:
        return False
    placed = knowledge.placements.get(ch)
    if not placed:
        return ch in word
    slots = {j for j, c in enumerate(word) if c == ch}
    return not slots or not slots <= placed


def is_consistent(word: str, guess: str, statuses: Sequence[LetterStatus],
                  knowledge: Knowledge) -> bool:
    """
    True if `word` survives every position of this round's feedback, judged
    with `knowledge` as it stood after the round was recorded.
    """
    return not any(_rules_out(word, i, ch, st, knowledge)
                   for i, (ch, st) in enumerate(zip(guess, statuses)))


def apply_feedback(
        words: MutableSet[str],
        guess: str,
        statuses: Sequence[LetterStatus],
        knowledge: Knowledge,
) -> int:
    """
    Update `knowledge` and prune `words` in place for one accepted round.

    Returns:
        number of words removed.

    Raises:
        InvalidGuessRejected if any status is INVALID (nothing is touched).
        NoCandidatesRemain if pruning empties the working set.
    """
    check_round(guess, statuses)
    before = len(words)

    record_feedback(knowledge, guess, statuses)

    for i, (ch, st) in enumerate(zip(guess, statuses)):
        doomed = {w for w in words if _rules_out(w, i, ch, st, knowledge)}
        words -= doomed

    # already played; if it had been the answer the puzzle would be over
    words.discard(guess)

    removed = before - len(words)
    log.debug(f"{guess}: removed {removed}, {len(words)} remain")
    if not words:
        raise NoCandidatesRemain(
            f"no candidates left after {guess} ({''.join(s.code for s in statuses)})")
    return removed
