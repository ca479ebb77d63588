"""Errors raised by kernet."""

from __future__ import annotations


class KernetError(Exception):
    """Base class for all kernet errors."""


class UninitializedContextError(KernetError, RuntimeError):
    """The global operator context was read before it was set."""


class UnsupportedTypeError(KernetError, TypeError):
    """A tensor has an element type for which no formula is defined."""


class InvalidShapeError(KernetError, ValueError):
    """A tensor has a shape the requested operation cannot reduce over."""


class UnsupportedActivationError(KernetError, KeyError):
    """No activation function is registered under the requested name."""

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0]) if self.args else ""


__all__ = [
    "InvalidShapeError",
    "KernetError",
    "UninitializedContextError",
    "UnsupportedActivationError",
    "UnsupportedTypeError",
]
