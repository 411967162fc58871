"""Exceptions raised while reading, checking and encoding ABI data."""

from __future__ import annotations


class AbiError(Exception):
    """Base class of every error raised by this package."""


class InvalidNameError(AbiError):
    """A type name or identifier could not be understood."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        self.reason = reason
        message = f"invalid name: {name!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidDataError(AbiError):
    """Data does not match what its type requires."""

    def __init__(self, message: str = "invalid data") -> None:
        super().__init__(message)