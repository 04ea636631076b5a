"""Conversion settings and publication presets.

Every publication has its own column ceilings for code listings, so the
settings are bundled into named presets (``webdb`` for the magazine,
``book`` for books) that individual values can override.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from md2inao.exceptions import ConfigError


# Ordered-list glyph styles; the first character is the reference-token code.
LIST_STYLES = ("disc", "circle", "square", "alpha")


@dataclass(frozen=True)
class InaoConfig:
    """Settings for one conversion.

    Attributes:
        default_list: Ordered-list style used when the list has no ``class``.
        max_list_length: Column ceiling for captioned listings (``●`` first).
        max_inline_list_length: Column ceiling for listings embedded in text.
    """

    default_list: str = "disc"
    max_list_length: int = 63
    max_inline_list_length: int = 55

    def __post_init__(self) -> None:
        if not self.default_list:
            raise ConfigError("default_list must not be empty")
        for name in ("max_list_length", "max_inline_list_length"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def from_preset(cls, preset: str = "webdb", **overrides) -> InaoConfig:
        """Build a config from *preset*, replacing any non-``None`` *overrides*."""
        if preset not in _PRESETS:
            raise ConfigError(
                f"Unknown preset {preset!r}. Choose from: {', '.join(_PRESETS)}"
            )
        return _PRESETS[preset].with_overrides(**overrides)

    def with_overrides(self, **overrides) -> InaoConfig:
        """Return a copy with the non-``None`` *overrides* applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if not values:
            return self
        return replace(self, **values)


# ---------------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------------

_PRESETS: dict[str, InaoConfig] = {
    # WEB+DB PRESS: listings 63 columns, body-embedded listings 55
    "webdb": InaoConfig(max_list_length=63, max_inline_list_length=55),
    # Books: listings 69 columns, body-embedded listings 73
    "book": InaoConfig(max_list_length=69, max_inline_list_length=73),
}

PRESETS = list(_PRESETS.keys())
