"""Forward, read-only cursor over a node chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterator, Optional

from ..core.errors import ChainModifiedError
from ..core.types import T

if TYPE_CHECKING:
    from ..core.chain import NodeChain
    from .node import Node


class ChainCursor(Generic[T]):
    """Walks a chain from its root to its tail, yielding each node's data.

    The cursor is either positioned at a node or exhausted. Advancing
    yields the current node's data and moves to its child; advancing
    past the tail exhausts the cursor for good. A cursor cannot be
    rewound, ask the chain for a fresh one instead.

    Invariants:
        - Exhausted is terminal, every further advance raises StopIteration
        - A cursor never mutates the chain it walks
        - With modification checks on, a positioned cursor refuses to
          advance once the chain's version differs from the one it
          was created against
    """

    __slots__ = ("_chain", "_node", "_version")

    def __init__(self, chain: NodeChain[T]) -> None:
        self._chain = chain
        self._node: Optional[Node[T]] = chain.head
        self._version: int = chain.version

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        node = self._node
        if node is None:
            raise StopIteration

        if self._chain.config.check_modification and self._chain.version != self._version:
            raise ChainModifiedError("chain was modified during iteration")

        self._node = node.child
        return node.data

    def __repr__(self) -> str:
        if self._node is None:
            return "ChainCursor(exhausted)"
        return f"ChainCursor(at={self._node.data!r})"

    @property
    def exhausted(self) -> bool:
        """True once the tail has been yielded."""
        return self._node is None
