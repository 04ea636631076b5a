"""Inline content renderer.

Turns the children of a paragraph, list item or blockquote into inao inline
markup. Text runs carry the ``(注:...)`` footnote notation, which may be
split across several runs by intervening elements, so the open/closed state
lives in the :class:`~md2inao.context.ConversionContext`.
"""

from __future__ import annotations

import re

from md2inao.context import ConversionContext
from md2inao.list_style import to_list_style
from md2inao.parser import Node

FOOTNOTE_MARKER = "(注:"
FOOTNOTE_OPEN = "◆注/◆"
FOOTNOTE_CLOSE = "◆/注◆"

_NEWLINE_RE = re.compile(r"[\n\r]")
_CAPTION_RE = re.compile(r"^●(.+?)::(.+)")
_CAPTION_NOTE_RE = re.compile(r"\[(.+)\]$")
_RUBY_RE = re.compile(r"(.+)\((.+)\)")


def _wrap(label: str, body: str) -> str:
    return f"◆{label}/◆{body}◆/{label}◆"


class InlineRenderer:
    """Render the inline children of a node to inao markup."""

    def render(
        self,
        node: Node,
        ctx: ConversionContext,
        *,
        special_italic: bool = False,
    ) -> str:
        """Return the rendered children of *node*, concatenated.

        Args:
            node: Inline-bearing node (``p``, ``li``, ...).
            ctx: Conversion state; the image counter and footnote flag are
                updated in place.
            special_italic: Use the Japanese italic token ``i-j`` (list items
                and columns) instead of ``i``.
        """
        ctx.footnote_open = False
        parts: list[str] = []
        for child in node.children:
            handler = getattr(self, f"_render_{child.tag}", None)
            if handler is not None:
                parts.append(handler(child, ctx, special_italic))
        return "".join(parts)

    # -- text ---------------------------------------------------------------

    def _render_text(self, node: Node, ctx: ConversionContext, _special: bool) -> str:
        text = self._convert_footnotes(node.text, ctx)
        text = _NEWLINE_RE.sub("", text)

        # ●title::body[note]
        text, found = _CAPTION_RE.subn("●\\1\t\\2", text, count=1)
        if found:
            text = _CAPTION_NOTE_RE.sub("\n\\1", text, count=1)

        return to_list_style(text)

    @staticmethod
    def _convert_footnotes(text: str, ctx: ConversionContext) -> str:
        out: list[str] = []
        pos = 0
        while True:
            if ctx.footnote_open:
                end = text.find(")", pos)
                if end < 0:
                    break
                out.append(text[pos:end] + FOOTNOTE_CLOSE)
                pos = end + 1
                ctx.footnote_open = False
            else:
                start = text.find(FOOTNOTE_MARKER, pos)
                if start < 0:
                    break
                out.append(text[pos:start] + FOOTNOTE_OPEN)
                pos = start + len(FOOTNOTE_MARKER)
                ctx.footnote_open = True
        out.append(text[pos:])
        return "".join(out)

    # -- elements -----------------------------------------------------------

    def _render_a(self, node: Node, _ctx: ConversionContext, _special: bool) -> str:
        return f"{node.trimmed_text()}{FOOTNOTE_OPEN}{node.attr('href')}{FOOTNOTE_CLOSE}"

    def _render_img(self, node: Node, ctx: ConversionContext, _special: bool) -> str:
        title = node.attr("alt") or node.attr("title")
        return f"●図{ctx.next_image_number()}\t{title}\n{node.attr('src')}\n"

    def _render_code(self, node: Node, _ctx: ConversionContext, _special: bool) -> str:
        return _wrap("cmd", node.trimmed_text())

    def _render_strong(self, node: Node, _ctx: ConversionContext, _special: bool) -> str:
        return _wrap("b", node.trimmed_text())

    def _render_em(self, node: Node, _ctx: ConversionContext, special: bool) -> str:
        return _wrap("i-j" if special else "i", node.trimmed_text())

    def _render_kbd(self, node: Node, _ctx: ConversionContext, _special: bool) -> str:
        return f"{node.trimmed_text()}▲"

    def _render_span(self, node: Node, _ctx: ConversionContext, _special: bool) -> str:
        css_class = node.attr("class")
        text = node.trimmed_text()
        if css_class == "red":
            return _wrap("red", text)
        if css_class == "ruby":
            # 漢字(かんじ)
            return _RUBY_RE.sub("◆ルビ/◆\\1◆\\2◆/ルビ◆", text, count=1)
        if css_class == "symbol":
            return f"◆{text}◆"
        return ""
