"""
Round controller: plays one guess per round against an oracle, forever.

States:
  OPENING  rounds 0..3, guesses come from OPENING_SCRIPT no matter what the
           working set looks like (20 distinct, frequent letters)
  SOLVING  round >= 4, guesses come from the candidate selector

Each round:
  1) pick a guess (script or selector)
  2) remember the oracle's completed-puzzle count, submit the guess
  3) count changed     -> RESET: note the revealed secret, restore the full
                          word list, forget all letter knowledge, round = 0
     any INVALID status -> log it, prune nothing, round does not advance
     otherwise          -> prune the working set, round += 1

Known-present letters are kept through the opening and dropped once, when
the first solving round's feedback comes in; the selector has used them for
that guess already and the pruned working set carries them from then on.
Within a round, a yellow that turns green leaves the set (see
record_feedback).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from packages.datasets.lexicon import Lexicon
from packages.engine.constraints import Knowledge, apply_feedback, check_round
from packages.engine.errors import InvalidGuessRejected
from packages.engine.feedback import LetterStatus, to_pattern
from packages.engine.selection import select_guess
from .oracle import Oracle

log = logging.getLogger(__name__)

OPENING_SCRIPT = ("FADES", "BROWN", "MIGHT", "PLUCK")


class Phase(enum.Enum):
    OPENING = "opening"
    SOLVING = "solving"


@dataclass
class RoundResult:
    guess: str
    statuses: List[LetterStatus]
    round: int                  # round counter when the guess was made
    phase: Phase
    accepted: bool              # False for INVALID rounds and resets
    reset: bool = False
    secret: str = ""            # revealed secret when reset is True
    removed: int = 0
    remaining: int = 0

    @property
    def pattern(self) -> str:
        return to_pattern(self.statuses)


class RoundController:
    def __init__(self, lexicon: Lexicon, oracle: Oracle,
                 opening: Sequence[str] = OPENING_SCRIPT):
        self.lexicon = lexicon
        self.oracle = oracle
        self.opening = tuple(w.upper() for w in opening)
        self.knowledge = Knowledge()
        self.round = 0
        self.last_secret = ""

    @property
    def working(self):
        return self.lexicon.working

    @property
    def phase(self) -> Phase:
        return Phase.OPENING if self.round < len(self.opening) else Phase.SOLVING

    def reset(self) -> None:
        self.lexicon.restore()
        self.knowledge.clear()
        self.round = 0

    def next_guess(self) -> str:
        if self.phase is Phase.OPENING:
            return self.opening[self.round]
        return select_guess(self.working, self.knowledge.present)

    def play_round(self) -> RoundResult:
        """
        Play one guess. Raises NoCandidatesRemain when feedback leaves
        nothing to guess from.
        """
        phase = self.phase
        guess = self.next_guess()
        before = self.oracle.completed_puzzle_count()
        statuses = list(self.oracle.submit_guess(guess))

        if self.oracle.completed_puzzle_count() != before:
            secret = self.oracle.revealed_secret_of_previous_puzzle()
            self.last_secret = secret
            log.info(f"new puzzle, previous word was {secret} "
                     f"(win rate {self.oracle.total_wins()}/{self.oracle.completed_puzzle_count()})")
            result = RoundResult(guess, statuses, self.round, phase, accepted=False,
                                 reset=True, secret=secret)
            self.reset()
            result.remaining = len(self.working)
            return result

        try:
            check_round(guess, statuses)
        except InvalidGuessRejected as e:
            log.warning(f"{e}; round {self.round} not counted")
            return RoundResult(guess, statuses, self.round, phase, accepted=False,
                               remaining=len(self.working))

        # Yellows from the opening fed this first solving guess; drop them now.
        if self.round == len(self.opening):
            self.knowledge.clear_present()

        removed = apply_feedback(self.working, guess, statuses, self.knowledge)
        result = RoundResult(guess, statuses, self.round, phase, accepted=True,
                             removed=removed, remaining=len(self.working))
        self.round += 1
        return result

    def rounds(self, max_puzzles: Optional[int] = None) -> Iterator[RoundResult]:
        """
        Yield rounds indefinitely, or until the oracle has completed
        `max_puzzles` more puzzles than when this was called.
        """
        start = self.oracle.completed_puzzle_count()
        while max_puzzles is None or self.oracle.completed_puzzle_count() - start < max_puzzles:
            yield self.play_round()
