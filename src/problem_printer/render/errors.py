"""Exceptions and warnings raised while rendering problems."""

from __future__ import annotations


class ProblemPrinterError(Exception):
    """Base class for problem printer failures."""


class MissingProblemBodyError(ProblemPrinterError, KeyError):
    """A problem record has no ``problem`` key."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Problem {index + 1} has no 'problem' content")

    def __str__(self) -> str:
        return str(self.args[0])


class ProblemSourceMissingError(ProblemPrinterError):
    """Tasks were requested but no problem source was configured."""


class PrintActionMissingError(ProblemPrinterError):
    """Printing was requested but no print action was configured."""


class UnknownContentTypeWarning(UserWarning):
    """A content unit carries a type no renderer handles; it was skipped."""


__all__ = [
    "MissingProblemBodyError",
    "PrintActionMissingError",
    "ProblemPrinterError",
    "ProblemSourceMissingError",
    "UnknownContentTypeWarning",
]
