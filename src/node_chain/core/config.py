"""Configuration for the node chain.

Defines the behavioural switches a chain is created with.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChainConfig:
    """Configuration parameters for a NodeChain.

    Attributes:
        strict_anchors: Raise AnchorNotFoundError from insert_after/insert_before
            instead of returning False when the anchor is absent
        check_modification: Cursors raise ChainModifiedError if the chain
            is mutated while they are positioned on it
    """

    strict_anchors: bool = False
    check_modification: bool = True
