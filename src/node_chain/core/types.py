"""Common type definitions for the node chain.

The only operation the chain ever asks of an element is ``==``.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar


# A protocol expressing that a type supports equality comparisons
class Equatable(Protocol):
    def __eq__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Equatable)
