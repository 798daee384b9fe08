from .controller import RoundController, RoundResult, Phase, OPENING_SCRIPT
from .oracle import Oracle, SimulatedOracle, WORDLE_MAX_TURNS
from .core import run_session, win_rate
from .io import write_csv, write_manifest

__all__ = [
    "RoundController", "RoundResult", "Phase", "OPENING_SCRIPT",
    "Oracle", "SimulatedOracle", "WORDLE_MAX_TURNS",
    "run_session", "win_rate", "write_csv", "write_manifest",
]
