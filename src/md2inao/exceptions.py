"""Exception and warning types raised by md2inao."""

from __future__ import annotations


class Md2InaoError(Exception):
    """Base class for md2inao errors."""


class ConfigError(Md2InaoError, ValueError):
    """Invalid settings or unknown preset."""


class LineLengthWarning(UserWarning):
    """A code or list block has a line wider than the configured ceiling.

    The block is still emitted unchanged; this is advisory only.

    Attributes:
        kind: ``"list"`` for captioned list blocks, ``"inline_list"`` for
            blocks embedded in body text.
        width: Display width of the widest line.
        limit: Configured ceiling for *kind*.
        text: The offending block as it will be emitted.
    """

    def __init__(self, kind: str, width: int, limit: int, text: str) -> None:
        self.kind = kind
        self.width = width
        self.limit = limit
        self.text = text
        label = "List" if kind == "list" else "Inline list"
        super().__init__(
            f"{label} lines must fit in {limit} columns (widest line uses {width}):\n{text}"
        )
