"""Exceptions raised by maven-coordinates."""

from __future__ import annotations


class CoordinatesError(Exception):
    """Base exception for maven-coordinates."""


class InvalidCoordinatesError(CoordinatesError, ValueError):
    """Raised when a coordinates string lacks group, artifact or version.

    Subclasses ValueError so callers validating user input can catch either.
    """

    def __init__(self, raw: str, tokens: int) -> None:
        super().__init__(
            f"Invalid Maven coordinates {raw!r}: expected "
            f"'groupId:artifactId:version[:packaging[:classifier]]', got {tokens} part(s)"
        )
        self.raw = raw
        self.tokens = tokens


__all__ = ["CoordinatesError", "InvalidCoordinatesError"]
