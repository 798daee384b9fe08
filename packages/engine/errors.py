"""
Error kinds raised by the solver engine.

  - InvalidGuessRejected : the oracle answered a round with INVALID statuses.
                           Recovered by the round controller (no pruning,
                           round does not count).
  - MalformedLexiconEntry: a word-list line is not five letters A–Z.
                           Recovered by the loader (line skipped).
  - EmptyLexicon         : nothing usable survived loading. Fatal.
  - NoCandidatesRemain   : the working set ran dry. Either the feedback was
                           inconsistent or the filter has a bug; never guessed
                           around.
"""


class SolverError(Exception):
    """Base class for every engine error."""


class InvalidGuessRejected(SolverError):
    def __init__(self, guess: str):
        super().__init__(f"guess rejected by oracle: {guess!r}")
        self.guess = guess


class MalformedLexiconEntry(SolverError, ValueError):
    def __init__(self, line: str, reason: str):
        super().__init__(f"malformed lexicon entry {line!r}: {reason}")
        self.line = line
        self.reason = reason


class EmptyLexicon(SolverError):
    pass


class NoCandidatesRemain(SolverError):
    pass
