"""Read-only node protocol and the BeautifulSoup-backed implementation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


class Node(Protocol):
    """Structural interface for a markup element.

    Anything exposing these four read-only views can be searched and
    extracted from, which keeps test doubles trivial.
    """

    @property
    def attributes(self) -> Mapping[str, str]:
        """Attribute key to literal value (multi-valued attributes space-joined)."""
        ...

    @property
    def children(self) -> Sequence[Node]:
        """Element children in document order."""
        ...

    @property
    def texts(self) -> Sequence[str]:
        """Direct text-node children in document order."""
        ...

    @property
    def text(self) -> str:
        """All nested text content concatenated."""
        ...


class SoupNode:
    """Adapter exposing a :class:`bs4.Tag` through the :class:`Node` protocol."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"SoupNode(<{self._tag.name} {self.attributes!r}>)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoupNode):
            return NotImplemented
        return self._tag is other._tag

    def __hash__(self) -> int:
        return id(self._tag)

    @property
    def attributes(self) -> dict[str, str]:
        result: dict[str, str] = {}
        for key, value in self._tag.attrs.items():
            result[key] = value if isinstance(value, str) else " ".join(value)
        return result

    @property
    def children(self) -> list[SoupNode]:
        return [SoupNode(child) for child in self._tag.children if isinstance(child, Tag)]

    @property
    def texts(self) -> list[str]:
        # Comments, CDATA and doctypes are PreformattedString subclasses.
        return [
            str(child)
            for child in self._tag.children
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString)
        ]

    @property
    def text(self) -> str:
        return self._tag.get_text()


def parse_html(markup: str | bytes) -> SoupNode:
    """Parse a document and return its root node.

    ``multi_valued_attributes=None`` keeps ``class`` as the literal string
    so markers match the whole attribute value.
    """
    soup = BeautifulSoup(markup, "html.parser", multi_valued_attributes=None)
    return SoupNode(soup)
