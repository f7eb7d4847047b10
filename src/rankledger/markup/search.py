"""Attribute-keyed tree search."""

from __future__ import annotations

from rankledger.exceptions import NodeNotFoundError
from rankledger.markup.node import Node


def search(root: Node, key: str, value: str) -> list[Node]:
    """Return every descendant of *root* whose attribute *key* equals *value*.

    *root* itself is never matched. Results follow document order
    (depth-first, pre-order) and every descendant is visited once. An
    explicit stack is used so deep trees cannot exhaust the recursion
    limit.

    Raises
    ------
    NodeNotFoundError
        When no descendant matches.
    """
    matches: list[Node] = []
    stack: list[Node] = list(reversed(root.children))
    while stack:
        node = stack.pop()
        if node.attributes.get(key) == value:
            matches.append(node)
        stack.extend(reversed(node.children))

    if not matches:
        raise NodeNotFoundError(
            f"Could not find element with key: {key}, value: {value}",
            key=key,
            value=value,
        )
    return matches
