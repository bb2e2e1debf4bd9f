"""Typed errors of the package."""
from __future__ import annotations


class TrampolineDigError(Exception):
    """Base error of the package."""


class InvalidInputError(TrampolineDigError, ValueError):
    """A raw input value cannot be parsed as the required numeric type."""

    def __init__(self, name: str, raw: object, expected: str) -> None:
        self.name = name
        self.raw = raw
        self.expected = expected
        super().__init__(f"invalid value for {name}: {raw!r} (expected {expected})")
