"""
Terminal rendering for rounds: coloured letter tiles, the new-puzzle notice
and the running win tally.
"""

from __future__ import annotations

from typing import Sequence

from packages.engine.feedback import LetterStatus

RESET = "\033[0m"
ANSI_COLORS = {
    LetterStatus.CORRECT: "\033[1;30;42m",
    LetterStatus.PRESENT: "\033[1;30;43m",
    LetterStatus.ABSENT: "\033[1;30;47m",
    LetterStatus.INVALID: "\033[1;30;41m",
}


def render_tiles(guess: str, statuses: Sequence[LetterStatus], color: bool = True) -> str:
    if not color:
        return f"{guess} {''.join(s.code for s in statuses)}"
    return "".join(f"{ANSI_COLORS[s]}{ch}{RESET}" for ch, s in zip(guess, statuses))


def render_round(result, wins: int, total: int, color: bool = True) -> str:
    """
    One console line per round, e.g.
        CRANE — win rate 3/4
        CRANE (new game—word was "CRANE") — win rate 4/5
    """
    line = render_tiles(result.guess, result.statuses, color=color)
    if result.reset:
        line += f' (new game—word was "{result.secret}")'
    return f"{line} — win rate {wins}/{total}"
