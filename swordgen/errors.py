"""Exit codes and the exceptions raised by the wordlist generator."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses, following the BSD sysexits convention."""

    OK = 0
    USAGE = 64
    NOINPUT = 66
    OSERR = 71
    CANTCREAT = 73
    IOERR = 74


class SwgError(Exception):
    """Base error; carries the exit status the program should end with."""

    exit_code: ExitCode = ExitCode.OSERR

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if exit_code is not None:
            self.exit_code = ExitCode(exit_code)


class UsageError(SwgError):
    """The command line was malformed."""

    exit_code = ExitCode.USAGE


class InputError(SwgError):
    """An input file could not be opened or read."""

    exit_code = ExitCode.NOINPUT


class OutputError(SwgError):
    """Output could not be created or written."""

    exit_code = ExitCode.IOERR