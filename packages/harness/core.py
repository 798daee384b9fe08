"""
Session runner: drive a RoundController for N puzzles and collect one
record per finished puzzle.

Record schema (one dict per puzzle):
    answer   (str)                 secret revealed by the oracle
    success  (bool)                the last guess was all green
    guesses  (int)                 accepted guesses, including the last one
    invalid  (int)                 rounds the oracle rejected
    time_ms  (float)               wall time spent in the controller
    history  (list[(guess, patt)]) every accepted guess with its pattern

The runner is UI-agnostic; `on_round` lets a CLI render rounds as they happen
and `on_puzzle` lets it tick a progress bar.
"""

from __future__ import annotations

import time
from typing import Callable, Dict, List, Optional

from packages.engine.feedback import is_solved
from .controller import RoundController, RoundResult


def run_session(
        controller: RoundController,
        games: int,
        *,
        on_round: Optional[Callable[[RoundResult], None]] = None,
        on_puzzle: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    if games < 1:
        raise ValueError(f"games must be >= 1; got {games}")

    out: List[Dict] = []
    history: List = []
    invalid = 0
    t0 = time.perf_counter()

    for r in controller.rounds(max_puzzles=games):
        if on_round is not None:
            on_round(r)

        if r.reset:
            history.append((r.guess, r.pattern))
            rec = {
                "answer": r.secret,
                "success": is_solved(r.statuses),
                "guesses": len(history),
                "invalid": invalid,
                "time_ms": (time.perf_counter() - t0) * 1000.0,
                "history": history,
            }
            out.append(rec)
            if on_puzzle is not None:
                on_puzzle(rec)
            history, invalid = [], 0
            t0 = time.perf_counter()
        elif r.accepted:
            history.append((r.guess, r.pattern))
        else:
            invalid += 1

    return out


def win_rate(results: List[Dict]) -> float:
    if not results:
        return 0.0
    return sum(1 for r in results if r["success"]) / len(results)
