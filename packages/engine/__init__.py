from .feedback import LetterStatus, feedback, to_pattern, from_pattern, is_solved
from .frequency import letter_frequencies, score_candidates, word_score
from .selection import select_guess
from .constraints import Knowledge, apply_feedback, is_consistent
from .validation import validate_guess, is_well_formed, WORD_LENGTH, ALPHABET
from .errors import (
    SolverError, InvalidGuessRejected, MalformedLexiconEntry, EmptyLexicon, NoCandidatesRemain,
)

__all__ = [
    "LetterStatus", "feedback", "to_pattern", "from_pattern", "is_solved",
    "letter_frequencies", "score_candidates", "word_score",
    "select_guess",
    "Knowledge", "apply_feedback", "is_consistent",
    "validate_guess", "is_well_formed", "WORD_LENGTH", "ALPHABET",
    "SolverError", "InvalidGuessRejected", "MalformedLexiconEntry", "EmptyLexicon",
    "NoCandidatesRemain",
]
