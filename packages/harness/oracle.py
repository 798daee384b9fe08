"""
The oracle: whatever holds the secret word and answers guesses.

The controller only relies on the `Oracle` protocol below. `SimulatedOracle`
is an offline implementation for experiments and tests:

  - picks secrets from an answer pool with a seeded RNG
  - answers a malformed (or, with `allowed`, unknown) guess with all INVALID
  - resolves a puzzle on an all-green answer (win) or after max_turns
    accepted guesses (loss), then moves on to a new secret

The completed-puzzle counter only ever grows; callers detect "the puzzle
changed under me" by comparing it before and after `submit_guess`.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional, Protocol

from packages.engine.feedback import LetterStatus, feedback, is_solved
from packages.engine.validation import WORD_LENGTH, normalize, validate_guess

log = logging.getLogger(__name__)

# Single source of truth for the turn budget.
WORDLE_MAX_TURNS = 6


class Oracle(Protocol):
    def submit_guess(self, word: str) -> List[LetterStatus]: ...

    def completed_puzzle_count(self) -> int: ...

    def revealed_secret_of_previous_puzzle(self) -> str: ...

    def total_wins(self) -> int: ...


class SimulatedOracle:
    def __init__(
            self,
            answers: Iterable[str],
            *,
            allowed: Optional[Iterable[str]] = None,
            max_turns: int = WORDLE_MAX_TURNS,
            seed: int | None = None,
    ):
        self.answers = sorted({normalize(a) for a in answers})
        if not self.answers:
            raise ValueError("answer pool is empty")
        self.allowed = None if allowed is None else {normalize(a) for a in allowed}
        self.max_turns = int(max_turns)
        self.rng = random.Random(seed)

        self._completed = 0
        self._wins = 0
        self._previous = ""
        self._turn = 0
        self._secret = self._draw()

    def _draw(self) -> str:
        return self.answers[self.rng.randrange(len(self.answers))]

    def _resolve(self, won: bool) -> None:
        self._completed += 1
        if won:
            self._wins += 1
        self._previous = self._secret
        self._turn = 0
        self._secret = self._draw()
        log.debug(f"puzzle {self._completed} {'won' if won else 'lost'}: {self._previous}")

    def submit_guess(self, word: str) -> List[LetterStatus]:
        if not validate_guess(word, self.allowed):
            return [LetterStatus.INVALID] * WORD_LENGTH

        statuses = feedback(word, self._secret)
        self._turn += 1
        if is_solved(statuses):
            self._resolve(won=True)
        elif self._turn >= self.max_turns:
            self._resolve(won=False)
        return statuses

    def completed_puzzle_count(self) -> int:
        return self._completed

    def revealed_secret_of_previous_puzzle(self) -> str:
        return self._previous

    def total_wins(self) -> int:
        return self._wins

    # Peeking is for tests and reports only; the controller never calls this.
    @property
    def secret(self) -> str:
        return self._secret

    def set_secret(self, word: str) -> None:
        """Force the current puzzle's secret (starts the puzzle over)."""
        self._secret = normalize(word)
        self._turn = 0
