"""Conversion of list-reference tokens into inao glyphs.

Body text refers to numbered list lines with short tokens, e.g.
``リスト1.1(c1)を見てください`` becomes ``リスト1.1（○1）を見てください``.

==========  ==========  =========
Token       Output      Style
==========  ==========  =========
``(d1)``    ``（1）``   disc
``(c1)``    ``（○1）``  circle
``(s1)``    ``［1］``   square
``(a1)``    ``（a）``   alpha
==========  ==========  =========

A backslash suppresses conversion: ``(\\d1)`` is emitted as ``(d1)``.
"""

from __future__ import annotations

import re

_DISC_RE = re.compile(r"\(d(\d+)\)")
_CIRCLE_RE = re.compile(r"\(c(\d+)\)")
_SQUARE_RE = re.compile(r"\(s(\d+)\)")
_ALPHA_RE = re.compile(r"\(a(\d+)\)")
_ESCAPED_RE = re.compile(r"\(\\([dcsa]?\d+)\)")

ALPHABET_SIZE = 26


def _alpha(match: re.Match[str]) -> str:
    number = int(match.group(1))
    # Past 'z' there is no agreed glyph; keep the token as written.
    if not 1 <= number <= ALPHABET_SIZE:
        return match.group(0)
    return f"（{chr(number + 96)}）"


def to_list_style(text: str) -> str:
    """Rewrite every list-reference token in *text* into its glyph form."""
    text = _DISC_RE.sub(r"（\1）", text)
    text = _CIRCLE_RE.sub(r"（○\1）", text)
    text = _SQUARE_RE.sub(r"［\1］", text)
    text = _ALPHA_RE.sub(_alpha, text)

    # Escapes are restored after conversion so they never get converted.
    return _ESCAPED_RE.sub(r"(\1)", text)
