"""Exception hierarchy for the node chain.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class ChainError(Exception):
    """Base exception for all node chain errors."""
    pass


class AnchorNotFoundError(ChainError):
    """Raised by a strict chain when no element equals the insertion anchor."""

    def __init__(self, anchor: object):
        super().__init__(f"anchor not found: {anchor!r}")
        self.anchor = anchor


class ChainModifiedError(ChainError, RuntimeError):
    """Raised when a chain is mutated while a cursor is walking it."""
    pass
