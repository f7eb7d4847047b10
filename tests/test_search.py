from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from rankledger.exceptions import NodeNotFoundError
from rankledger.markup import parse_html, search


@dataclass(eq=False)
class Element:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Element] = field(default_factory=list)
    texts: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.texts) + "".join(child.text for child in self.children)


def test_single_match_returns_that_node() -> None:
    target = Element("span", {"class": "score"})
    root = Element("div", children=[Element("p", children=[target]), Element("p")])

    assert search(root, "class", "score") == [target]


def test_no_match_raises_not_found_with_key_and_value() -> None:
    root = Element("div", children=[Element("p", {"class": "other"})])

    with pytest.raises(NodeNotFoundError) as excinfo:
        search(root, "class", "score")

    assert excinfo.value.key == "class"
    assert excinfo.value.value == "score"


def test_root_itself_is_never_matched() -> None:
    root = Element("div", {"id": "x"})

    with pytest.raises(NodeNotFoundError):
        search(root, "id", "x")


def test_multiple_matches_follow_document_order() -> None:
    first = Element("li", {"data-k": "v"})
    nested = Element("li", {"data-k": "v"})
    outer = Element("ul", {"data-k": "v"}, children=[Element("li", children=[nested])])
    last = Element("li", {"data-k": "v"})
    root = Element("body", children=[first, outer, Element("hr"), last])

    assert search(root, "data-k", "v") == [first, outer, nested, last]


def test_key_and_value_must_both_match() -> None:
    root = Element(
        "div",
        children=[
            Element("a", {"class": "v"}),
            Element("a", {"id": "k"}),
            Element("a", {"k": "v"}),
        ],
    )

    assert [node.attributes for node in search(root, "k", "v")] == [{"k": "v"}]


def test_deep_tree_does_not_hit_recursion_limit() -> None:
    root = Element("root")
    node = root
    for _ in range(20_000):
        child = Element("div")
        node.children.append(child)
        node = child
    node.attributes["id"] = "bottom"

    assert search(root, "id", "bottom") == [node]


def test_soup_class_attribute_matches_whole_string_only() -> None:
    page = parse_html(
        '<div><a class="hoverinfo_trigger fl-l">img</a><a class="hoverinfo_trigger">Alpha</a></div>'
    )

    matches = search(page, "class", "hoverinfo_trigger")

    assert len(matches) == 1
    assert matches[0].text == "Alpha"
