"""Custom exception hierarchy for the program engine."""

from __future__ import annotations


class ProgramEngineError(Exception):
    """Base exception for all program_engine errors."""


class InvalidPreferencesError(ProgramEngineError):
    """A Preferences object was constructed with broken invariants."""


class LibraryFormatError(ProgramEngineError):
    """A library snapshot could not be read at all (not a mapping, bad JSON...)."""

    def __init__(self, message: str, collection: str | None = None) -> None:
        super().__init__(message)
        self.collection = collection
