"""Building an HTML document as a flat chain of nodes and rendering it."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

__all__ = [
    "MAX_TAG_DEPTH",
    "STYLE_COLOR",
    "TAG_BODY",
    "TAG_HEAD",
    "TAG_HTML",
    "TAG_P",
    "TAG_TITLE",
    "HtmlNode",
    "HtmlWriter",
    "NodeKind",
    "NodeType",
    "render_html",
]

MAX_TAG_DEPTH = 16


class NodeKind(enum.IntEnum):
    """What a node stands for in the document."""

    TAG = 1
    ATTR = 2
    STYLE = 3
    FRAGMENT = 4


@dataclass(frozen=True)
class NodeType:
    """A tag, attribute or style property, with its script-side name."""

    name: str
    js_name: str
    kind: NodeKind


TAG_HTML = NodeType("html", "html", NodeKind.TAG)
TAG_BODY = NodeType("body", "body", NodeKind.TAG)
TAG_HEAD = NodeType("head", "head", NodeKind.TAG)
TAG_TITLE = NodeType("title", "title", NodeKind.TAG)
TAG_P = NodeType("p", "p", NodeKind.TAG)
STYLE_COLOR = NodeType("color", "color", NodeKind.STYLE)


@dataclass(eq=False)
class HtmlNode:
    """One node of the chain.

    A tag node is followed in the chain by its attribute nodes, then its style
    nodes, then its child tags.
    """

    node_type: NodeType
    key: int = 0
    content: str = ""
    attr_count: int = 0
    style_count: int = 0
    child_tag_count: int = 0
    next: HtmlNode | None = None

    def chain(self) -> Iterator[HtmlNode]:
        """Yield this node and every node linked after it."""
        node: HtmlNode | None = self
        while node is not None:
            yield node
            node = node.next


def _take(nodes: Iterator[HtmlNode], owner: HtmlNode) -> HtmlNode:
    node = next(nodes, None)
    if node is None:
        raise ValueError(f"node chain ends inside <{owner.node_type.name}>")
    return node


def render_html(root: HtmlNode) -> str:
    """Render the chain starting at ``root`` as HTML text.

    Text and attribute values are written as given, without escaping.
    """
    out: list[str] = []
    stack: list[list] = []  # [tag node, children still to close]
    nodes = root.chain()

    for tag in nodes:
        name = tag.node_type.name
        out.append(f"<{name}")

        for _ in range(tag.attr_count):
            attr = _take(nodes, tag)
            out.append(f' {attr.node_type.name}="{attr.content}"')

        if tag.style_count:
            out.append(' style="')
            for _ in range(tag.style_count):
                style = _take(nodes, tag)
                out.append(f"{style.node_type.name}:{style.content};")
            out.append('"')

        if tag.child_tag_count:
            if len(stack) >= MAX_TAG_DEPTH:
                raise ValueError(f"tags nested deeper than {MAX_TAG_DEPTH}")
            stack.append([tag, tag.child_tag_count])
            out.append(">")
            continue

        if tag.content:
            out.append(f">{tag.content}</{name}>")
        else:
            out.append(" />")

        while stack:
            stack[-1][1] -= 1
            if stack[-1][1]:
                break
            closed, _ = stack.pop()
            out.append(f"</{closed.node_type.name}>")

    return "".join(out)


class HtmlWriter:
    """Appends tags, attributes, styles and text to a document under ``<html>``."""

    def __init__(self) -> None:
        self.document_root = HtmlNode(TAG_HTML)
        self.current_tag = self.document_root
        self._last_node = self.document_root
        self._stack: list[HtmlNode] = []

    def _append(self, node: HtmlNode) -> HtmlNode:
        self._last_node.next = node
        self._last_node = node
        return node

    def start_tag(self, node_type: NodeType, key: int = 0) -> HtmlNode:
        """Open a tag; what follows goes inside it until ``end_tag``."""
        if len(self._stack) >= MAX_TAG_DEPTH - 1:
            raise ValueError(f"tags nested deeper than {MAX_TAG_DEPTH}")
        node = self._append(HtmlNode(node_type, key=key))
        self.current_tag.child_tag_count += 1
        self.current_tag = node
        self._stack.append(node)
        return node

    def single_tag(self, node_type: NodeType, key: int = 0) -> HtmlNode:
        """Add a tag that has no children."""
        node = self._append(HtmlNode(node_type, key=key))
        self.current_tag.child_tag_count += 1
        return node

    def end_tag(self) -> HtmlNode | None:
        """Close the innermost open tag.

        Returns the tag that is open again, or None when back at the root.
        """
        if self._stack:
            self._stack.pop()
        if not self._stack:
            self.current_tag = self.document_root
            return None
        self.current_tag = self._stack[-1]
        return self.current_tag

    @contextmanager
    def tag(self, node_type: NodeType, key: int = 0) -> Iterator[HtmlNode]:
        """Open a tag for the duration of a ``with`` block."""
        node = self.start_tag(node_type, key)
        try:
            yield node
        finally:
            self.end_tag()

    def text(self, text: str) -> HtmlNode:
        """Set the text of the current tag; a tag with child tags drops it."""
        self.current_tag.content = text
        return self.current_tag

    def attr(self, attr: NodeType, value: str) -> HtmlNode:
        """Add an attribute to the current tag."""
        node = self._append(HtmlNode(attr, content=value))
        self.current_tag.attr_count += 1
        return node

    def style(self, style: NodeType, value: str) -> HtmlNode:
        """Add a style property to the current tag."""
        node = self._append(HtmlNode(style, content=value))
        self.current_tag.style_count += 1
        return node

    def render(self) -> str:
        """Render the whole document."""
        return render_html(self.document_root)