"""Display-width calculation using East-Asian width classes.

Print layouts count columns, not code points: a fullwidth glyph such as
``漢`` occupies two columns, an ASCII letter one.
"""

from __future__ import annotations

import re
import unicodedata

_WIDE = frozenset({"F", "W"})
_NARROW = frozenset({"H", "Na", "N"})
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def char_width(ch: str, *, ambiguous_wide: bool = True) -> int:
    """Return the column width of a single character."""
    eaw = unicodedata.east_asian_width(ch)
    if eaw in _WIDE:
        return 2
    if eaw == "A":
        return 2 if ambiguous_wide else 1
    if eaw in _NARROW:
        return 1
    return 0


def visual_length(line: str, *, ambiguous_wide: bool = True) -> int:
    """Return the number of display columns *line* occupies.

    Args:
        line: A single line of text (no line breaks expected).
        ambiguous_wide: Count East-Asian *ambiguous* characters (``●``,
            ``○``, Greek, Cyrillic, ...) as fullwidth. Japanese typesetting
            does, so this is the default.

    Returns:
        Total width: 2 per fullwidth character, 1 per halfwidth one.
    """
    return sum(char_width(ch, ambiguous_wide=ambiguous_wide) for ch in line)


def max_visual_length(text: str, *, ambiguous_wide: bool = True) -> int:
    """Return the width of the widest line in *text* (0 for empty text)."""
    return max(
        (visual_length(line, ambiguous_wide=ambiguous_wide) for line in _LINE_SPLIT_RE.split(text)),
        default=0,
    )
