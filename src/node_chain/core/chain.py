"""NodeChain implementation - main public API.

A non-empty singly-linked list. Owns the root node, performs every
mutation, and hands out read-only cursors.

Time Complexity:
Append: O(n), walks to the tail
Insert: O(1) for the splice, but O(n) to find the anchor
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Iterable, List, Optional

from ..components.cursor import ChainCursor
from ..components.node import Node
from .config import ChainConfig
from .errors import AnchorNotFoundError
from .types import T

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class NodeChain(Generic[T]):
    """Singly-linked chain of nodes holding values of type T.

    Args:
        value: Data of the root node; a chain is never empty
        config: Chain configuration, defaults to ChainConfig()

    Public API:
        - append(value) / extend(values): Add at the tail
        - insert_after(anchor, value): Splice after first match
        - insert_before(anchor, value): Splice before first match
        - find(value): First node holding value
        - iter(): Fresh forward cursor

    Invariants:
        - Every node is linked from exactly one place (the root
          reference or one parent), so links form a simple path
        - Search runs root to tail and the first match wins
        - A failed insert leaves the chain untouched
        - version changes on every successful mutation
    """

    def __init__(self, value: T, config: Optional[ChainConfig] = None) -> None:
        self.config = config if config is not None else ChainConfig()
        self._head: Node[T] = Node(value)
        self._size: int = 1
        self._version: int = 0

    @classmethod
    def from_iterable(
        cls, values: Iterable[T], config: Optional[ChainConfig] = None
    ) -> NodeChain[T]:
        """Build a chain whose iteration order equals values."""
        it = iter(values)
        try:
            first = next(it)
        except StopIteration:
            raise ValueError("cannot build a chain from an empty iterable") from None

        chain = cls(first, config)
        chain.extend(it)
        return chain

    @property
    def head(self) -> Node[T]:
        return self._head

    @property
    def tail(self) -> Node[T]:
        current = self._head
        while not current.is_tail():
            current = current.child
        return current

    @property
    def version(self) -> int:
        """Modification counter, bumped by every successful mutation."""
        return self._version

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __contains__(self, value: T) -> bool:
        return self.find(value) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeChain):
            return NotImplemented
        return len(self) == len(other) and self.to_list() == other.to_list()

    def __repr__(self) -> str:
        output = "[Head] " + " -> ".join(str(v) for v in self.to_list()) + " [Tail]"
        return output

    def iter(self) -> ChainCursor[T]:
        """Return a fresh cursor positioned at the root."""
        return ChainCursor(self)

    def to_list(self) -> List[T]:
        values: List[T] = []
        current: Optional[Node[T]] = self._head
        while current is not None:
            values.append(current.data)
            current = current.child
        return values

    def find(self, value: T) -> Optional[Node[T]]:
        """
        Returns the first node, scanning from the root, whose
        data equals value. Returns None if there is no match.
        O(n), since in the worst case it must scan the entire chain.
        """
        current: Optional[Node[T]] = self._head
        while current is not None:
            if current.data == value:
                return current
            current = current.child
        return None

    def append(self, value: T) -> None:
        """Attach value as the new tail."""
        tail = self.tail
        tail.child = Node(value)
        self._grew()
        logger.debug(f"Appended {value!r}, length={self._size}")

    def extend(self, values: Iterable[T]) -> None:
        """Append each value in order, walking to the tail only once.

        values is read in full before the chain is touched, so an
        iterable backed by this chain sees it as it was before the call.
        """
        values = list(values)

        tail = self.tail
        for value in values:
            tail.child = Node(value)
            tail = tail.child
            self._grew()
        logger.debug(f"Extended chain, length={self._size}")

    def insert_after(self, anchor: T, value: T) -> bool:
        """
        Splices a new node holding value directly after the first
        node whose data equals anchor. The new node takes over the
        anchor's former child.
        """
        found = self.find(anchor)
        if found is None:
            return self._anchor_missing(anchor)

        found.child = Node(value, child=found.child)
        self._grew()
        logger.debug(f"Inserted {value!r} after {anchor!r}, length={self._size}")
        return True

    def insert_before(self, anchor: T, value: T) -> bool:
        """
        Splices a new node holding value directly before the first
        node whose data equals anchor. The new node becomes the
        predecessor of the anchor node, so the link that pointed at
        the anchor (the root reference or the parent's child) is
        re-pointed at it.
        """
        parent: Optional[Node[T]] = None
        current: Optional[Node[T]] = self._head
        while current is not None:
            if current.data == anchor:
                new_node = Node(value, child=current)
                if parent is None:
                    self._head = new_node
                else:
                    parent.child = new_node
                self._grew()
                logger.debug(f"Inserted {value!r} before {anchor!r}, length={self._size}")
                return True
            parent, current = current, current.child

        return self._anchor_missing(anchor)

    def _anchor_missing(self, anchor: T) -> bool:
        if self.config.strict_anchors:
            raise AnchorNotFoundError(anchor)
        return False

    def _grew(self) -> None:
        self._size += 1
        self._version += 1
