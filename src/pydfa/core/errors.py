"""
Exceptions raised while loading an automaton.

AutomatonIOError covers files that cannot be opened or read.
AutomatonFormatError and its subclasses cover every inconsistency found
while building the automaton. Classification outcomes are never errors.
"""

from __future__ import annotations


class AutomatonError(Exception):
    """Base class for all load failures."""

    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class AutomatonIOError(AutomatonError, OSError):
    """Automaton or strings file cannot be opened or read."""


class AutomatonFormatError(AutomatonError, ValueError):
    """Automaton description is malformed or inconsistent."""


class MissingSection(AutomatonFormatError):
    """Stream ended before a required section was read."""


class UnknownStartState(AutomatonFormatError):
    pass


class DuplicateState(AutomatonFormatError):
    pass


class DuplicateSymbol(AutomatonFormatError):
    pass


class UnknownFinalState(AutomatonFormatError):
    pass


class DuplicateFinalState(AutomatonFormatError):
    pass


class InvalidTransition(AutomatonFormatError):
    """Transition line is not a `from symbol to` triple of known names."""


class DuplicateTransition(AutomatonFormatError):
    """A (state, symbol) pair already has a target."""


class LimitExceeded(AutomatonFormatError):
    """More states or symbols than the configured maximum."""
