"""
Letter frequency analysis and candidate scoring.

  - letter_frequencies: for every letter A–Z, how many words in the set
    contain it at least once (document frequency, not occurrence count).
  - word_score / score_candidates: a word is worth the sum of the
    frequencies of its DISTINCT letters, so "SLATE" beats "SLEET" when the
    counts are similar.

Both are pure functions; the table is rebuilt from the current working set
whenever a guess is needed and never carried across puzzles.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, Mapping

from .validation import ALPHABET

FrequencyTable = Dict[str, int]


def letter_frequencies(words: Iterable[str]) -> FrequencyTable:
    counts: Counter = Counter()
    for w in words:
        counts.update(set(w))
    return {ch: counts[ch] for ch in ALPHABET}


def word_score(word: str, table: Mapping[str, int]) -> int:
    return sum(table.get(ch, 0) for ch in set(word))


def score_candidates(words: Iterable[str], table: Mapping[str, int]) -> Dict[str, int]:
    """
    Score every word against `table`. Ties are left alone; the selector
    decides between equal scores.
    """
    return {w: word_score(w, table) for w in words}
