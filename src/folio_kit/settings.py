# src/folio_kit/settings.py

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field

from folio_kit.measurement.base import PageLayout
from folio_kit.pagination.config import PaginationConfig
from folio_kit.styling.colors import ColorPalette

logger = logging.getLogger(__name__)


class LayoutSettings(BaseModel):
    width: float = Field(800.0, gt=0)
    height: float = Field(1100.0, gt=0)
    padding_vertical: float = Field(48.0, ge=0)
    padding_horizontal: float = Field(56.0, ge=0)
    font_size: float = Field(16.0, gt=0)

    class Config:
        extra = "forbid"

    def to_layout(self) -> PageLayout:
        return PageLayout(
            width=self.width,
            height=self.height,
            padding_vertical=self.padding_vertical,
            padding_horizontal=self.padding_horizontal,
            font_size=self.font_size,
        )


class FolioSettings(BaseModel):
    """User-facing settings, usually loaded from a YAML file."""

    strategy: Literal["fixed", "adaptive"] = "fixed"
    words_per_page: int = Field(450, gt=0)
    words_per_image: int = Field(100, ge=0)
    min_words_per_page: int = Field(50, gt=0)
    max_pages: int = Field(10_000, gt=0)
    max_iterations: int = Field(10, gt=0)
    min_viable_words: int = Field(10, gt=0)
    measure_attempts: int = Field(2, gt=0)
    layout: LayoutSettings = Field(default_factory=LayoutSettings)
    flag_colors: dict[str, str] = Field(default_factory=dict)
    section_colors: dict[str, str] = Field(default_factory=dict)

    class Config:
        extra = "forbid"

    def pagination_config(self) -> PaginationConfig:
        return PaginationConfig(
            strategy=self.strategy,
            words_per_page=self.words_per_page,
            words_per_image=self.words_per_image,
            min_words_per_page=self.min_words_per_page,
            layout=self.layout.to_layout(),
            max_iterations=self.max_iterations,
            min_viable_words=self.min_viable_words,
            measure_attempts=self.measure_attempts,
            max_pages=self.max_pages,
        )

    def palette(self) -> ColorPalette:
        return ColorPalette.with_overrides(self.flag_colors, self.section_colors)


def load_settings(path: str | Path) -> FolioSettings:
    logger.info("Loading settings from %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    settings = FolioSettings(**data)
    logger.debug("Loaded settings: strategy=%s", settings.strategy)
    return settings
