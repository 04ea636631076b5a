"""Markdown parser that produces the node tree consumed by the renderers.

Uses mistune v3 to render Markdown to HTML (raw HTML such as
``<span class="red">`` or ``<div class="column">`` is passed through), then
BeautifulSoup to read that HTML back into a tree of :class:`Node`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

import mistune
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag


# ---------------------------------------------------------------------------
# Node definition
# ---------------------------------------------------------------------------

TEXT = "text"

# Elements serialised without a closing tag
_VOID_TAGS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})

_TRIM_RE = re.compile(r"[\n\r\f\t ]+")


def _escape_text(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;")


def _escape_attr(s: str) -> str:
    return (
        s.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


@dataclass
class Node:
    """An element (``tag`` is its name) or a text run (``tag == "text"``)."""

    tag: str
    children: list[Node] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    text: str = ""

    @property
    def is_text(self) -> bool:
        return self.tag == TEXT

    def attr(self, name: str, default: str = "") -> str:
        return self.attrs.get(name) or default

    def text_content(self) -> str:
        """Concatenated text of this node and all its descendants."""
        if self.is_text:
            return self.text
        return "".join(child.text_content() for child in self.children)

    def trimmed_text(self) -> str:
        """Text content with whitespace runs collapsed and ends trimmed."""
        return _TRIM_RE.sub(" ", self.text_content()).strip(" ")

    def iter_descendants(self) -> Iterator[Node]:
        """Yield all descendants in document order, *self* excluded."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_all(self, tag: str) -> list[Node]:
        """Every descendant element named *tag*, at any depth."""
        return [n for n in self.iter_descendants() if n.tag == tag]

    def find(self, tag: str) -> Optional[Node]:
        return next((n for n in self.iter_descendants() if n.tag == tag), None)

    def inner_html(self) -> str:
        return "".join(child.to_html() for child in self.children)

    def inner_markup(self) -> str:
        """Children as Markdown source for a second parse.

        Direct text runs are raw Markdown written inside an HTML block and
        are returned as decoded text; only serialised elements are escaped.
        """
        return "".join(
            child.text if child.is_text else child.to_html() for child in self.children
        )

    def to_html(self) -> str:
        if self.is_text:
            return _escape_text(self.text)
        attrs = "".join(
            f' {name}="{_escape_attr(value)}"' for name, value in self.attrs.items()
        )
        if self.tag in _VOID_TAGS:
            return f"<{self.tag}{attrs}/>"
        return f"<{self.tag}{attrs}>{self.inner_html()}</{self.tag}>"


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class MarkdownParser:
    """Parse Markdown text into a :class:`Node` tree rooted at ``body``."""

    def __init__(self) -> None:
        self._md = mistune.create_markdown(
            escape=False,
            plugins=["table"],
        )

    # -- public API ---------------------------------------------------------

    def parse(self, markdown_text: str) -> Node:
        """Return the ``body`` node for *markdown_text*."""
        html: str = self._md(markdown_text)  # type: ignore[assignment]
        return self.parse_html(html)

    def parse_html(self, html: str) -> Node:
        """Return the ``body`` node for an already rendered HTML fragment."""
        soup = BeautifulSoup(html, "html.parser")
        return Node(tag="body", children=self._convert_children(soup))

    # -- tree conversion ----------------------------------------------------

    def _convert_children(self, tag: Tag) -> list[Node]:
        nodes: list[Node] = []
        for child in tag.children:
            node = self._convert(child)
            if node is not None:
                nodes.append(node)
        return nodes

    def _convert(self, element) -> Optional[Node]:
        # Comments, doctypes, CDATA and processing instructions
        if isinstance(element, PreformattedString):
            return None
        if isinstance(element, NavigableString):
            return Node(tag=TEXT, text=str(element))
        if isinstance(element, Tag):
            return Node(
                tag=element.name,
                attrs={name: self._attr_value(value) for name, value in element.attrs.items()},
                children=self._convert_children(element),
            )
        return None

    @staticmethod
    def _attr_value(value) -> str:
        # Multi-valued attributes (class, rel, ...) come back as lists
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)
