"""inao block renderer - converts a node tree to inao markup.

This module walks the top-level blocks of a tree produced by
:mod:`md2inao.parser` and emits the plain-text inao markup used by the
production team: ``■`` headings, ``◆list/◆`` listings, ``◆table/◆`` tables,
``◆column/◆`` columns and ``◆quote/◆`` quotes. Inline content is delegated to
:class:`~md2inao.inline.InlineRenderer`.

Columns are rendered as independent documents: their inner markup is handed
back to the document-level ``transform`` callable.
"""

from __future__ import annotations

import logging
import re
import warnings
from typing import Callable, Optional

from md2inao.config import InaoConfig
from md2inao.context import ConversionContext
from md2inao.exceptions import LineLengthWarning
from md2inao.inline import InlineRenderer
from md2inao.list_style import to_list_style
from md2inao.parser import MarkdownParser, Node
from md2inao.width import max_visual_length

logger = logging.getLogger(__name__)

# (markup, *, is_column) -> inao text
Transform = Callable[..., str]

_HEADING_RE = re.compile(r"h([1-6])$")
_BLOCK_TAGS = frozenset({"p", "pre", "ul", "ol", "table", "div", "blockquote"})
_BLANK_RE = re.compile(r"[\s　]*")
_WHITESPACE_RE = re.compile(r"\s")

# Listing (pre) rewrites
_CAPTION_RE = re.compile(r"●(.+?)::(.+)")
_CMD_MARKER_RE = re.compile(r"\A!!![ \t]*cmd[ \t]*(?:\r?\n|\Z)")
_COMMENT_RE = re.compile(r"\(注:(.+?)\)")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"___(.+?)___")

_SUMMARY_RE = re.compile(r"(.+?)::(.+)")


class InaoRenderer:
    """Render a :class:`~md2inao.parser.Node` document tree to inao text."""

    def __init__(
        self,
        config: Optional[InaoConfig] = None,
        transform: Optional[Transform] = None,
    ) -> None:
        self.config: InaoConfig = config or InaoConfig()
        self.inline = InlineRenderer()
        self._transform: Transform = transform or self._transform_markup

    # ======================================================================
    # Public API
    # ======================================================================

    def render(
        self,
        doc: Node,
        ctx: ConversionContext,
        *,
        is_column: bool = False,
    ) -> str:
        """Return the inao markup for the block children of *doc*."""
        parts: list[str] = []
        for child in doc.children:
            parts.append(self._render_node(child, ctx, is_column))
        return "".join(parts)

    # ======================================================================
    # Node dispatch
    # ======================================================================

    def _render_node(self, node: Node, ctx: ConversionContext, is_column: bool) -> str:
        heading = _HEADING_RE.match(node.tag)
        if heading:
            return self._heading(node, int(heading.group(1)))
        if node.tag not in _BLOCK_TAGS:
            return ""
        handler = getattr(self, f"_render_{node.tag}")
        return handler(node, ctx, is_column)

    # ======================================================================
    # Per-tag renderers
    # ======================================================================

    def _heading(self, node: Node, level: int) -> str:
        return "■" * level + node.trimmed_text() + "\n"

    def _render_p(self, node: Node, ctx: ConversionContext, is_column: bool) -> str:
        text = self.inline.render(node, ctx, special_italic=is_column)
        if _BLANK_RE.fullmatch(text):
            return ""
        return text + "\n"

    def _render_pre(self, node: Node, _ctx: ConversionContext, _is_column: bool) -> str:
        code = node.find("code")
        text = code.text_content() if code is not None else ""
        list_label = "list"
        comment_label = "comment"

        text = _CAPTION_RE.sub("●\\1\t\\2", text)

        # Listings starting with "!!! cmd" are command lines (black background)
        marker = _CMD_MARKER_RE.match(text)
        if marker:
            text = text[marker.end():]
            list_label += "-white"
            comment_label += "-white"

        text = to_list_style(text)
        self._check_width(text)

        text = _COMMENT_RE.sub(f"◆{comment_label}/◆\\1◆/{comment_label}◆", text)
        text = _BOLD_RE.sub("◆cmd-b/◆\\1◆/cmd-b◆", text)
        text = _ITALIC_RE.sub("◆i-j/◆\\1◆/i-j◆", text)

        return f"◆{list_label}/◆\n{text}◆/{list_label}◆\n"

    def _render_ul(self, node: Node, ctx: ConversionContext, _is_column: bool) -> str:
        return "".join(
            "・" + self.inline.render(item, ctx, special_italic=True) + "\n"
            for item in node.find_all("li")
        )

    def _render_ol(self, node: Node, ctx: ConversionContext, _is_column: bool) -> str:
        style = node.attr("class") or self.config.default_list
        code = style[:1]
        lines: list[str] = []
        for index, item in enumerate(node.find_all("li"), start=1):
            marker = to_list_style(f"({code}{index})")
            lines.append(marker + self.inline.render(item, ctx, special_italic=True) + "\n")
        return "".join(lines)

    def _render_table(self, node: Node, _ctx: ConversionContext, _is_column: bool) -> str:
        caption = _SUMMARY_RE.sub("●\\1\t\\2\n", node.attr("summary"), count=1)
        parts = ["◆table/◆\n", caption, "◆table-title◆"]
        for row in node.find_all("tr"):
            cells = row.find_all("th") + row.find_all("td")
            parts.append("\t".join(cell.trimmed_text() for cell in cells) + "\n")
        parts.append("◆/table◆\n")
        return "".join(parts)

    def _render_div(self, node: Node, _ctx: ConversionContext, _is_column: bool) -> str:
        if node.attr("class") != "column":
            return ""
        logger.debug("Rendering column as a nested document")
        body = self._transform(node.inner_markup(), is_column=True)
        return f"◆column/◆\n{body}◆/column◆\n"

    def _render_blockquote(self, node: Node, ctx: ConversionContext, _is_column: bool) -> str:
        # Only the last paragraph of a quote survives
        quote = ""
        for child in node.children:
            if not child.is_text:
                quote = self.inline.render(child, ctx, special_italic=True)
        quote = _WHITESPACE_RE.sub("", quote)
        return f"◆quote/◆\n{quote}\n◆/quote◆\n"

    # ======================================================================
    # Helpers
    # ======================================================================

    def _transform_markup(self, markup: str, *, is_column: bool = False) -> str:
        doc = MarkdownParser().parse(markup)
        return self.render(doc, ConversionContext(), is_column=is_column)

    def _check_width(self, text: str) -> None:
        width = max_visual_length(text)
        if text.startswith("●"):
            kind, limit = "list", self.config.max_list_length
        else:
            kind, limit = "inline_list", self.config.max_inline_list_length
        if width > limit:
            violation = LineLengthWarning(kind, width, limit, text)
            # The warnings registry drops repeats; the log record does not
            logger.warning("%s", violation)
            warnings.warn(violation)
