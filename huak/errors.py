"""Errors raised by the command line and the operations behind it."""

from __future__ import annotations

from enum import Enum, auto

BASIC_ERROR_CODE = 1


class ErrorKind(Enum):
    """The kinds of failure a command can report."""

    NOT_IMPLEMENTED = auto()
    MISSING_ARGUMENTS = auto()
    UNKNOWN_ERROR = auto()
    IO_ERROR = auto()
    UNKNOWN_COMMAND = auto()
    DIRECTORY_EXISTS = auto()
    OTHER = auto()
    RUFF = auto()
    BLACK = auto()
    PYTEST = auto()
    PYTHON_NOT_FOUND = auto()
    VENV_NOT_FOUND = auto()


_FIXED_MESSAGES = {
    ErrorKind.MISSING_ARGUMENTS: "Some arguments were missing.",
    ErrorKind.IO_ERROR: "An IO error occurred.",
    ErrorKind.UNKNOWN_COMMAND: "This is an unknown command. Please check --help.",
    ErrorKind.DIRECTORY_EXISTS: "This directory already exists and may not be empty!",
    ErrorKind.NOT_IMPLEMENTED: "This feature is not implemented.",
    ErrorKind.VENV_NOT_FOUND: "No venv was found.",
    ErrorKind.UNKNOWN_ERROR: "An unknown error occurred. Please file a bug report.",
    ErrorKind.PYTHON_NOT_FOUND: (
        "Python was not found on your operating system. Please install Python."
    ),
}

_WRAPPING_MESSAGES = {
    ErrorKind.OTHER: "An error occurred: {}",
    ErrorKind.RUFF: "Ruff Error: {}",
    ErrorKind.BLACK: "Black Error: {}",
    ErrorKind.PYTEST: "Pytest Error: {}",
}


class CliError(Exception):
    """An error reported to the user, carrying the exit status to use."""

    def __init__(self, kind, status_code=BASIC_ERROR_CODE, cause=None):
        super().__init__(kind, status_code, cause)
        self.kind = kind
        self.status_code = status_code
        self.cause = cause

    def __str__(self):
        if self.kind in _WRAPPING_MESSAGES:
            return _WRAPPING_MESSAGES[self.kind].format(self.cause)
        return _FIXED_MESSAGES[self.kind]


class InternalError(Exception):
    """An unexpected, internal error that warrants a bug report."""


def internal(error):
    """Build an InternalError from any displayable value."""
    return InternalError(str(error))


def wrap(error):
    """Turn any exception into a CliError with the basic exit status."""
    if isinstance(error, CliError):
        return error
    return CliError(ErrorKind.OTHER, BASIC_ERROR_CODE, error)