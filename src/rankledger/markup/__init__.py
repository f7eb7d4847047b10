"""Markup tree access.

The rest of the library only sees the :class:`~rankledger.markup.node.Node`
protocol; the BeautifulSoup adapter is one implementation of it.
"""

from rankledger.markup.node import Node, SoupNode, parse_html
from rankledger.markup.search import search

__all__ = ["Node", "SoupNode", "parse_html", "search"]
