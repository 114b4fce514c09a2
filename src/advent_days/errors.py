from __future__ import annotations


class SolverError(Exception):
    """Base class for every failure that ends a solver run."""


class UnknownSelectorError(SolverError, LookupError):
    def __init__(self, message: str, *, day: int, task: int) -> None:
        super().__init__(message)
        self.day = day
        self.task = task


class InputFileError(SolverError):
    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class PuzzleParseError(SolverError, ValueError):
    pass


class NoSolutionError(SolverError):
    pass
