# src/folio_kit/styling/colors.py

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

FLAG_FALLBACK_COLOR = "#888888"
SECTION_FALLBACK_COLOR = "#086ddd"

DEFAULT_FLAG_COLORS: dict[str, str] = {
    "TODO": "#ffd700",
    "NOW": "#ff4444",
    "DONE": "#44ff44",
    "WAITING": "#ff9944",
    "NOTE": "#4488ff",
    "IMPORTANT": "#ff44ff",
    "COMMENT": "#888888",
    "MISSING": "#ff6b6b",
}

DEFAULT_SECTION_COLORS: dict[str, str] = {
    "DEFAULT": SECTION_FALLBACK_COLOR,
    "SUMMARY": "#808080",
}


def _normalize_keys(colors: Mapping[str, str]) -> dict[str, str]:
    return {key.upper(): value for key, value in colors.items() if key}


@dataclass(frozen=True)
class ColorPalette:
    """Type name to color mapping for inline flags and section markers.

    Immutable. Keys are upper-cased on construction, so lookups are
    case-insensitive.
    """

    flag_colors: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_FLAG_COLORS)
    )
    section_colors: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_SECTION_COLORS)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "flag_colors", _normalize_keys(self.flag_colors))
        object.__setattr__(
            self, "section_colors", _normalize_keys(self.section_colors)
        )

    @classmethod
    def with_overrides(
        cls,
        flag_colors: Mapping[str, str] | None = None,
        section_colors: Mapping[str, str] | None = None,
    ) -> "ColorPalette":
        """Defaults merged with caller overrides (overrides win)."""
        return cls(
            flag_colors={**DEFAULT_FLAG_COLORS, **_normalize_keys(flag_colors or {})},
            section_colors={
                **DEFAULT_SECTION_COLORS,
                **_normalize_keys(section_colors or {}),
            },
        )


class ColorResolver:
    """Pure lookup from annotation / marker type names to display colors."""

    def __init__(self, palette: ColorPalette | None = None) -> None:
        self.palette = palette or ColorPalette()

    def flag_color(self, type_name: str) -> str:
        normalized = (type_name or "").upper()
        color = self.palette.flag_colors.get(normalized)
        if color is None:
            logger.debug("No flag color for %r, using fallback", type_name)
            return FLAG_FALLBACK_COLOR
        return color

    def section_color(self, type_name: str) -> str:
        normalized = (type_name or "").upper()
        if normalized in self.palette.section_colors:
            return self.palette.section_colors[normalized]
        return self.palette.section_colors.get("DEFAULT", SECTION_FALLBACK_COLOR)
