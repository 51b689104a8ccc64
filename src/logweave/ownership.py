"""
Single-ownership bookkeeping for sinks and loggers.

Each node of a logger chain records the object that adopted it. A second
adoption is rejected, so a sink or logger can never end up in two chains.
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from .errors import OwnershipError

T = TypeVar("T")


def adopt(owner: object, node: T) -> T:
    """Record ``owner`` as the sole owner of ``node`` and return ``node``."""
    current = getattr(node, "_owner", None)
    if current is not None:
        raise OwnershipError(node=node, owner=current)
    node._owner = owner  # type: ignore[attr-defined]
    return node


def is_owned(node: object) -> bool:
    return getattr(node, "_owner", None) is not None


def adopt_all(owner: object, nodes: Iterable[T]) -> list[T]:
    """Adopt every node or none of them.

    All nodes are checked before any is claimed, so a rejected batch leaves
    every node free. A node listed twice counts as shared.
    """
    batch = list(nodes)
    seen: set[int] = set()
    for node in batch:
        current = getattr(node, "_owner", None)
        if current is None and id(node) in seen:
            current = owner
        if current is not None:
            raise OwnershipError(node=node, owner=current)
        seen.add(id(node))
    for node in batch:
        node._owner = owner  # type: ignore[attr-defined]
    return batch
