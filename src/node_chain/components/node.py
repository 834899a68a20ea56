"""Node container for the chain."""

from __future__ import annotations  # allows forward-referencing without quotes

from typing import Generic, Optional

from ..core.types import T


class Node(Generic[T]):
    """
    A node is a container which contains data of type T
    and the child node it links to. A node with no child
    is the tail of its chain.
    """

    __slots__ = ("data", "child")

    def __init__(self, data: T, child: Optional[Node[T]] = None) -> None:
        self.data: T = data
        self.child: Optional[Node[T]] = child

    def __repr__(self) -> str:
        return f"[Node] {self.data!r}"

    def is_tail(self) -> bool:
        return self.child is None
