"""Exceptions raised while building or reading a mipmap."""

from __future__ import annotations

__all__ = [
    "MipMapError",
    "EmptyInputError",
    "InvalidShapeError",
    "UnsupportedDtypeError",
    "InvalidLevelError",
]


class MipMapError(Exception):
    """Base class for all mipmap errors."""


class EmptyInputError(MipMapError, ValueError):
    """Construction was attempted with a zero-length sequence."""


class InvalidShapeError(MipMapError, ValueError):
    """Input is not one-dimensional."""


class UnsupportedDtypeError(MipMapError, TypeError):
    """Input elements are not real integers or floats."""


class InvalidLevelError(MipMapError, IndexError):
    """A negative level index was requested."""
