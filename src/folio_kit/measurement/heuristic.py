# src/folio_kit/measurement/heuristic.py

import logging
from math import ceil

from folio_kit.parsers.patterns import IMAGE_PATTERN, WORD_PATTERN

from .base import Measurement, PageLayout

logger = logging.getLogger(__name__)

LINE_HEIGHT_MULTIPLIER = 1.6
AVG_CHAR_WIDTH_RATIO = 0.55
AVG_WORD_LENGTH = 6
MIN_ESTIMATED_WORDS = 50
DEFAULT_IMAGE_HEIGHT = 240.0


def chars_per_line(layout: PageLayout) -> int:
    char_width = layout.font_size * AVG_CHAR_WIDTH_RATIO
    return max(1, int(layout.available_width // char_width))


def lines_per_page(layout: PageLayout) -> int:
    return max(1, int(layout.available_height // line_height(layout)))


def line_height(layout: PageLayout) -> float:
    return layout.font_size * LINE_HEIGHT_MULTIPLIER


def estimate_words_per_page(layout: PageLayout) -> int:
    """Starting guess for how many words fill one page, from font metrics."""
    total_chars = chars_per_line(layout) * lines_per_page(layout)
    return max(MIN_ESTIMATED_WORDS, total_chars // AVG_WORD_LENGTH)


def estimate_measurement(
    markdown: str,
    layout: PageLayout,
    image_height: float = DEFAULT_IMAGE_HEIGHT,
) -> Measurement:
    """Height of ``markdown`` under a fixed characters-per-line model.

    Every source line wraps at ``chars_per_line``; blank lines still take a
    line. Each embedded image adds ``image_height``.
    """
    per_line = chars_per_line(layout)
    images = list(IMAGE_PATTERN.finditer(markdown))
    text = IMAGE_PATTERN.sub("", markdown)

    lines = 0
    for source_line in text.split("\n"):
        lines += max(1, ceil(len(source_line.rstrip()) / per_line))

    image_heights = tuple(image_height for _ in images)
    return Measurement(
        height=lines * line_height(layout) + sum(image_heights),
        image_count=len(images),
        image_heights=image_heights,
        word_count=sum(1 for _ in WORD_PATTERN.finditer(text)),
    )


class HeuristicMeasurer:
    """Measurement oracle that never renders anything.

    Stands in for a real rendering host in headless use and in tests, and is
    the fallback whenever the real oracle cannot be used.
    """

    def __init__(self, image_height: float = DEFAULT_IMAGE_HEIGHT) -> None:
        self.image_height = image_height
        self.acquired = False

    async def acquire(self, layout: PageLayout) -> None:
        logger.debug("HeuristicMeasurer acquired for width=%s", layout.width)
        self.acquired = True

    async def measure(self, markdown: str, layout: PageLayout) -> Measurement:
        return estimate_measurement(markdown, layout, self.image_height)

    async def release(self) -> None:
        self.acquired = False
