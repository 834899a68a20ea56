"""Protocol definitions for the node chain."""

from .chain import Chain

__all__ = ["Chain"]
