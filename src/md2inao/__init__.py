"""Convert Markdown to inao publishing markup."""

from __future__ import annotations

__version__ = "0.1.0"

from md2inao.config import PRESETS, InaoConfig
from md2inao.converter import Converter
from md2inao.exceptions import ConfigError, LineLengthWarning, Md2InaoError
from md2inao.list_style import to_list_style
from md2inao.width import visual_length

__all__ = [
    "PRESETS",
    "ConfigError",
    "Converter",
    "InaoConfig",
    "LineLengthWarning",
    "Md2InaoError",
    "__version__",
    "to_list_style",
    "visual_length",
]
