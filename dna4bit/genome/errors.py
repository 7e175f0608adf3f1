from __future__ import annotations


class DnaError(Exception):
    """Base exception for sequence retrieval."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DatabaseError(DnaError):
    """Packed file could not be opened, seeked or read."""


class LocationError(DnaError):
    """Malformed or invalid genomic location."""


class FormatError(DnaError):
    """Decoded bytes are not valid sequence text."""
