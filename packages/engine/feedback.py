"""
Per-letter feedback for a (guess, answer) pair.

Statuses:
  - CORRECT : right letter, right position        (pattern char 'G')
  - PRESENT : letter in the answer, wrong position (pattern char 'Y')
  - ABSENT  : letter not present, or present fewer
              times than guessed                   (pattern char '-')
  - INVALID : the guess was rejected              (pattern char '!')

`feedback()` is the reference two-pass algorithm used by the simulated oracle
and the tests:
  1) First pass marks all CORRECT positions and counts the unmatched letters
     of the answer.
  2) Second pass marks PRESENT only while the letter still has remaining count.

Example: feedback("SEEDY", "SCENT") -> G - G - -  (the first E is ABSENT
because the answer's single E is consumed by the green one).
"""

from __future__ import annotations

import enum
from collections import Counter
from typing import Iterable, List


class LetterStatus(enum.Enum):
    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "-"
    INVALID = "!"

    @property
    def code(self) -> str:
        return self.value


def feedback(guess: str, answer: str) -> List[LetterStatus]:
    """
    Compute the status of every letter of `guess` against `answer`.

    Both words are compared case-insensitively and must have the same length.
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer must be the same length: {guess!r} vs {answer!r}")

    out = [LetterStatus.ABSENT] * len(guess)

    # Pass 1: greens, and leftover counts from the answer
    remaining: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            out[i] = LetterStatus.CORRECT
        else:
            remaining[a] += 1

    # Pass 2: yellows capped by true multiplicity
    for i, g in enumerate(guess):
        if out[i] is LetterStatus.CORRECT:
            continue
        if remaining[g] > 0:
            out[i] = LetterStatus.PRESENT
            remaining[g] -= 1

    return out


def to_pattern(statuses: Iterable[LetterStatus]) -> str:
    """[CORRECT, ABSENT, ...] -> "G-..." """
    return "".join(s.code for s in statuses)


def from_pattern(pattern: str) -> List[LetterStatus]:
    """
    Parse a pattern string back into statuses.

    Accepts the canonical 'G', 'Y', '-', '!' characters; '.', 'B' and 'X' are
    also read as ABSENT since hand-typed patterns use them for gray.
    """
    out: List[LetterStatus] = []
    for ch in pattern.strip().upper():
        if ch in ".BX":
            ch = "-"
        try:
            out.append(LetterStatus(ch))
        except ValueError as e:
            raise ValueError(f"unknown pattern character {ch!r} in {pattern!r}") from e
    return out


def is_solved(statuses: Iterable[LetterStatus]) -> bool:
    return all(s is LetterStatus.CORRECT for s in statuses)
