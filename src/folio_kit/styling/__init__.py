from .colors import (
    DEFAULT_FLAG_COLORS,
    DEFAULT_SECTION_COLORS,
    FLAG_FALLBACK_COLOR,
    SECTION_FALLBACK_COLOR,
    ColorPalette,
    ColorResolver,
)

__all__ = [
    "ColorPalette",
    "ColorResolver",
    "DEFAULT_FLAG_COLORS",
    "DEFAULT_SECTION_COLORS",
    "FLAG_FALLBACK_COLOR",
    "SECTION_FALLBACK_COLOR",
]
