"""Error types raised by monadkit itself.

Containers never raise while transforming values; exceptions from caller
functions propagate unchanged. The only library-level failure is an attempt
to put the absence marker inside ``Some``.
"""

from __future__ import annotations

__all__ = [
    'MonadkitError',
    'NoneValueError',
]


class MonadkitError(Exception):
    """Base class for monadkit errors."""


class NoneValueError(MonadkitError, ValueError):
    """Some was constructed with None - use Nothing or from_nullable() instead."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'Some() cannot wrap None; use from_nullable() for nullable values')
