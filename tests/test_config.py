"""Tests for conversion settings and presets."""

from __future__ import annotations

import pytest

from md2inao.config import LIST_STYLES, PRESETS, InaoConfig
from md2inao.exceptions import ConfigError


class TestInaoConfig:

    def test_defaults(self):
        config = InaoConfig()
        assert config.default_list == "disc"
        assert config.max_list_length == 63
        assert config.max_inline_list_length == 55

    @pytest.mark.parametrize("field", ["max_list_length", "max_inline_list_length"])
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_ceiling_rejected(self, field, value):
        with pytest.raises(ConfigError):
            InaoConfig(**{field: value})

    def test_empty_default_list_rejected(self):
        with pytest.raises(ConfigError):
            InaoConfig(default_list="")

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            InaoConfig(max_list_length=0)

    def test_frozen(self):
        config = InaoConfig()
        with pytest.raises(AttributeError):
            config.max_list_length = 10  # type: ignore[misc]


class TestPresets:

    def test_preset_names(self):
        assert PRESETS == ["webdb", "book"]

    def test_book(self):
        config = InaoConfig.from_preset("book")
        assert (config.max_list_length, config.max_inline_list_length) == (69, 73)

    def test_none_overrides_ignored(self):
        config = InaoConfig.from_preset("book", max_list_length=None, default_list="circle")
        assert config.max_list_length == 69
        assert config.default_list == "circle"

    def test_unknown_preset(self):
        with pytest.raises(ConfigError, match="Choose from: webdb, book"):
            InaoConfig.from_preset("nonexistent")

    def test_list_styles_have_distinct_codes(self):
        assert sorted(style[0] for style in LIST_STYLES) == ["a", "c", "d", "s"]
