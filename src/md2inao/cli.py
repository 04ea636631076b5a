"""Command-line interface for md2inao.

Usage::

    md2inao input.md                      # writes inao markup to stdout
    md2inao input.md -o output.txt        # explicit output path
    md2inao input.md --preset book        # use the book column ceilings
    md2inao --list-presets                # list available presets
"""

from __future__ import annotations

import argparse
import logging
import sys
import warnings
from pathlib import Path

from md2inao import __version__
from md2inao.config import LIST_STYLES, PRESETS
from md2inao.converter import Converter
from md2inao.exceptions import LineLengthWarning, Md2InaoError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_TOO_WIDE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2inao",
        description="Convert Markdown files to inao publishing markup.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the Markdown file to convert.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path. Defaults to stdout.",
    )
    parser.add_argument(
        "-p", "--preset",
        default="webdb",
        choices=PRESETS,
        help="Column ceiling preset (default: %(default)s).",
    )
    parser.add_argument(
        "--default-list",
        choices=LIST_STYLES,
        help="Ordered-list style for lists without a class.",
    )
    parser.add_argument(
        "--max-list-length",
        type=int,
        help="Column ceiling for captioned listings (overrides the preset).",
    )
    parser.add_argument(
        "--max-inline-list-length",
        type=int,
        help="Column ceiling for listings embedded in text (overrides the preset).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 when a listing is too wide.",
    )
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="List available presets and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug logging.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    package_logger = logging.getLogger("md2inao")
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for preset in PRESETS:
            print(f"  - {preset}")
        return EXIT_OK

    if not args.input:
        parser.error("the following argument is required: input")

    _configure_logging(args)

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return EXIT_ERROR

    logger.info("Input:  %s", input_path)
    logger.info("Output: %s", args.output or "<stdout>")
    logger.info("Preset: %s", args.preset)

    try:
        converter = Converter(
            preset=args.preset,
            default_list=args.default_list,
            max_list_length=args.max_list_length,
            max_inline_list_length=args.max_inline_list_length,
        )
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", LineLengthWarning)
            inao = converter.convert_text(input_path.read_text(encoding=args.encoding))
    except (Md2InaoError, OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    # Violations were already logged by the renderer; only count them here
    too_wide = []
    for caught_warning in caught:
        if issubclass(caught_warning.category, LineLengthWarning):
            too_wide.append(caught_warning.message)
        else:
            warnings.showwarning(
                caught_warning.message,
                caught_warning.category,
                caught_warning.filename,
                caught_warning.lineno,
            )

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(inao, encoding="utf-8")
        logger.info("Done. %d characters written.", len(inao))
    else:
        sys.stdout.write(inao)

    if too_wide and args.strict:
        return EXIT_TOO_WIDE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
