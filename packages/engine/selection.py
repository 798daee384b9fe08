"""
Candidate selection with tiered relaxation.

Tiers (first non-empty wins):
  1. five distinct letters AND every known-present letter
  2. every known-present letter (repeats allowed)
  3. five distinct letters
  4. the whole working set

The chosen tier is scored against the frequency table of the FULL working
set, not of the tier, so the ranking reflects how much each guess would
split what is still possible.

An empty known-present set satisfies "contains every known-present letter"
for every word, which makes tier 1 the same as tier 3 until some yellow is
seen. That is intentional.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Collection, List, Mapping, Optional, Tuple

from .errors import NoCandidatesRemain
from .frequency import letter_frequencies, score_candidates
from .validation import has_unique_letters

log = logging.getLogger(__name__)


def has_all_present(word: str, known_present: AbstractSet[str]) -> bool:
    return all(ch in word for ch in known_present)


def _tiers(known_present: AbstractSet[str]) -> List[Callable[[str], bool]]:
    return [
        lambda w: has_unique_letters(w) and has_all_present(w, known_present),
        lambda w: has_all_present(w, known_present),
        has_unique_letters,
        lambda w: True,
    ]


def pick_tier(words: Collection[str], known_present: AbstractSet[str]) -> Tuple[int, List[str]]:
    """
    Return (tier number 1..4, members of that tier sorted alphabetically).
    """
    if not words:
        raise NoCandidatesRemain("cannot select a guess from an empty working set")
    for n, keep in enumerate(_tiers(known_present), start=1):
        members = sorted(w for w in words if keep(w))
        if members:
            return n, members
    # tier 4 keeps everything, so only an empty input gets here
    raise NoCandidatesRemain("no tier produced a candidate")


def best_candidate(candidates: List[str], table: Mapping[str, int]) -> str:
    """
    Highest score wins; equal scores go to the alphabetically first word.
    """
    scores = score_candidates(candidates, table)
    return min(candidates, key=lambda w: (-scores[w], w))


def select_guess(
        words: Collection[str],
        known_present: AbstractSet[str],
        table: Optional[Mapping[str, int]] = None,
) -> str:
    """
    Pick the next guess from the working set.

    Args:
        words         : the current working set
        known_present : letters known to be in the secret ("yellows")
        table         : frequency table over `words`; built here if omitted

    Raises:
        NoCandidatesRemain if `words` is empty.
    """
    tier, members = pick_tier(words, known_present)
    if table is None:
        table = letter_frequencies(words)
    guess = best_candidate(members, table)
    log.debug(f"tier {tier}: {len(members)} of {len(words)} words, chose {guess}")
    return guess
