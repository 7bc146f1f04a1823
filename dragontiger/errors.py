"""Compiler diagnostics."""

from __future__ import annotations

import sys

from .location import Location


class CompilerError(Exception):
    """A fatal diagnostic, optionally attached to a source location."""

    def __init__(self, message: str, loc: Location | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.loc = loc

    def __str__(self) -> str:
        if self.loc is None:
            return self.message
        return f"{self.loc}: {self.message}"


def error(message: str, loc: Location | None = None) -> None:
    """Report a fatal error by raising :class:`CompilerError`."""
    raise CompilerError(message, loc)


def non_fatal_error(message: str, loc: Location | None = None) -> None:
    """Print a diagnostic to standard error and carry on."""
    print(CompilerError(message, loc), file=sys.stderr)