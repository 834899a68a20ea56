"""Building blocks of a node chain."""

from .cursor import ChainCursor
from .node import Node

__all__ = ["ChainCursor", "Node"]
