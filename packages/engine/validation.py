"""
Word-shape checks shared by the lexicon loader, the oracle and the controller.

A word is well formed iff:
  - it is a string
  - after stripping and uppercasing it is exactly WORD_LENGTH characters
  - every character is one of ALPHABET (plain A–Z, no accented letters)

Membership in a particular word list is a separate question answered by
`validate_guess`.
"""

from __future__ import annotations

from typing import Iterable, Optional

WORD_LENGTH = 5

# Total order over the alphabet; used for tie-breaks only.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ALPHABET_SET = frozenset(ALPHABET)


def normalize(word: str) -> str:
    return word.strip().upper()


def shape_problem(word) -> Optional[str]:
    """
    Return a short reason why `word` is not a well-formed guess, or None.
    """
    if not isinstance(word, str):
        return "not a string"
    w = normalize(word)
    if len(w) != WORD_LENGTH:
        return f"length {len(w)} != {WORD_LENGTH}"
    if not set(w) <= _ALPHABET_SET:
        return "non-letter characters"
    return None


def is_well_formed(word) -> bool:
    return shape_problem(word) is None


def validate_guess(word, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is well formed and, when `allowed` is given, a
    member of it (case-insensitive).

    Pass a set for `allowed` when calling in a loop; other iterables are
    normalized into a set on every call.
    """
    if not is_well_formed(word):
        return False
    if allowed is None:
        return True
    if not isinstance(allowed, (set, frozenset)):
        allowed = {normalize(a) for a in allowed}
    return normalize(word) in allowed


def has_unique_letters(word: str) -> bool:
    """True when all WORD_LENGTH letters differ (maximizes coverage per guess)."""
    return len(set(word)) == WORD_LENGTH
