"""Per-conversion mutable state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConversionContext:
    """State threaded through one document conversion.

    A column is converted as an independent document and gets its own
    context, so its figures are numbered from 1 again.
    """

    # Number of the last figure emitted
    image_number: int = 0
    # A ``(注:`` footnote has been opened and its ``)`` not seen yet
    footnote_open: bool = False

    def next_image_number(self) -> int:
        self.image_number += 1
        return self.image_number
