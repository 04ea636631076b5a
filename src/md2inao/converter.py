"""High-level Markdown-to-inao conversion orchestrator.

Ties together the parser, configuration and renderer into a single public
API for converting Markdown text or files to inao markup.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from md2inao.config import PRESETS, InaoConfig
from md2inao.context import ConversionContext
from md2inao.parser import MarkdownParser
from md2inao.renderer import InaoRenderer

logger = logging.getLogger(__name__)


class Converter:
    """Convert Markdown content to inao markup.

    Usage::

        converter = Converter(preset="book")
        converter.convert_file("input.md", "output.txt")

        # or from string
        inao = converter.convert_text("# Hello")

    Lines wider than the configured ceilings are reported with
    :class:`~md2inao.exceptions.LineLengthWarning`; the conversion itself
    never fails on document content.
    """

    PRESETS = PRESETS

    def __init__(
        self,
        preset: str = "webdb",
        *,
        config: Optional[InaoConfig] = None,
        default_list: Optional[str] = None,
        max_list_length: Optional[int] = None,
        max_inline_list_length: Optional[int] = None,
    ) -> None:
        overrides = dict(
            default_list=default_list,
            max_list_length=max_list_length,
            max_inline_list_length=max_inline_list_length,
        )
        if config is None:
            config = InaoConfig.from_preset(preset, **overrides)
        else:
            config = config.with_overrides(**overrides)
        self.config = config
        self.parser = MarkdownParser()
        self.renderer = InaoRenderer(config, transform=self.convert_text)

    def convert_text(self, markdown_text: str, *, is_column: bool = False) -> str:
        """Convert Markdown text to inao markup.

        Each call numbers its figures from 1, including the nested calls
        made for columns.

        Args:
            markdown_text: Markdown source string.
            is_column: Render as the body of a column (Japanese italics in
                paragraphs).

        Returns:
            The inao markup.
        """
        ctx = ConversionContext()
        doc = self.parser.parse(markdown_text)
        logger.debug("Converting %d top-level nodes (column=%s)", len(doc.children), is_column)
        return self.renderer.render(doc, ctx, is_column=is_column)

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> None:
        """Read a Markdown file and write the inao output.

        Args:
            input_path: Path to the input ``.md`` file.
            output_path: Path for the output text file.
            encoding: Text encoding of the source file.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        md_text = input_path.read_text(encoding=encoding)
        inao = self.convert_text(md_text)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(inao, encoding="utf-8")
        logger.info("Wrote %s", output_path)
