"""Protocol definition for a node chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..core.types import T

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ..components.node import Node


@runtime_checkable
class Chain(Protocol[T]):
    """Public API of a non-empty singly-linked chain."""

    def append(self, value: T) -> None:
        """Attach value as the new tail."""
        ...

    def extend(self, values: Iterable[T]) -> None:
        """Append each value in order."""
        ...

    def insert_after(self, anchor: T, value: T) -> bool:
        """Place value right after the first element equal to anchor.

        Returns False, leaving the chain unchanged, when no element matches.
        """
        ...

    def insert_before(self, anchor: T, value: T) -> bool:
        """Place value right before the first element equal to anchor.

        Returns False, leaving the chain unchanged, when no element matches.
        """
        ...

    def find(self, value: T) -> Node[T] | None:
        """Return the first node holding value, or None."""
        ...

    def iter(self) -> Iterator[T]:
        """Return a fresh forward cursor positioned at the root."""
        ...

    def __len__(self) -> int:
        ...
