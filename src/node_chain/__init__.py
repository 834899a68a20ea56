"""Node chain - a non-empty singly-linked list in Python."""

from .components.cursor import ChainCursor
from .components.node import Node
from .core.chain import NodeChain
from .core.config import ChainConfig
from .core.errors import AnchorNotFoundError, ChainError, ChainModifiedError
from .core.types import Equatable
from .interfaces.chain import Chain

__all__ = [
    "NodeChain",
    "ChainConfig",
    "ChainCursor",
    "Node",
    "Chain",
    "Equatable",
    "ChainError",
    "AnchorNotFoundError",
    "ChainModifiedError",
]
