# src/folio_kit/pagination/fixed.py

import logging
from time import monotonic

from folio_kit.observability import names
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook, elapsed_ms

from .models import Page
from .words import count_images, make_page, word_spans

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PER_PAGE = 450
DEFAULT_WORDS_PER_IMAGE = 100
DEFAULT_MIN_WORDS_PER_PAGE = 50
DEFAULT_MAX_PAGES = 10_000


def _validate(
    words_per_page: int,
    words_per_image: int,
    min_words_per_page: int,
    max_pages: int,
) -> None:
    if words_per_page <= 0:
        raise ValueError("words_per_page must be > 0")
    if words_per_image < 0:
        raise ValueError("words_per_image must be >= 0")
    if min_words_per_page <= 0:
        raise ValueError("min_words_per_page must be > 0")
    if max_pages <= 0:
        raise ValueError("max_pages must be > 0")


def paginate_by_words(
    text: str,
    *,
    words_per_page: int = DEFAULT_WORDS_PER_PAGE,
    words_per_image: int = DEFAULT_WORDS_PER_IMAGE,
    min_words_per_page: int = DEFAULT_MIN_WORDS_PER_PAGE,
    max_pages: int = DEFAULT_MAX_PAGES,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Page]:
    """Split ``text`` into pages of roughly ``words_per_page`` words.

    Each page looks ahead over its candidate span and gives up
    ``words_per_image`` words per embedded image, but never drops below
    ``min_words_per_page`` (capped at ``words_per_page``). Past
    ``max_pages`` the result is truncated and a warning is logged.
    """
    _validate(words_per_page, words_per_image, min_words_per_page, max_pages)

    start = monotonic()
    if not text or not text.strip():
        logger.debug("Empty document, no pages")
        return []

    spans = word_spans(text)
    floor = min(min_words_per_page, words_per_page)
    pages: list[Page] = []
    index = 0

    while index < len(spans):
        if len(pages) >= max_pages:
            logger.warning(
                "Pagination truncated at %d pages, %d words left out",
                max_pages,
                len(spans) - index,
            )
            metrics_hook.increment(names.PAGINATION_TRUNCATED_TOTAL)
            break

        look_ahead = min(index + words_per_page, len(spans))
        look_ahead_end = spans[look_ahead][0] if look_ahead < len(spans) else len(text)
        images = count_images(text, spans[index][0], look_ahead_end)

        target = max(floor, words_per_page - images * words_per_image)
        stop = min(index + target, len(spans))
        pages.append(make_page(text, spans, index, stop, len(pages)))
        logger.debug(
            "Page %d: words=%d, images=%d", len(pages) - 1, stop - index, images
        )
        index = stop

    metrics_hook.record_latency(names.PAGINATION_DURATION, elapsed_ms(start))
    metrics_hook.increment(
        names.PAGINATION_PAGES_CREATED, len(pages), labels={"strategy": "fixed"}
    )
    logger.info("Paginated %d words into %d pages", len(spans), len(pages))
    return pages


class FixedWordPaginator:
    """Deterministic word-count pagination. The default strategy."""

    def __init__(
        self,
        words_per_page: int = DEFAULT_WORDS_PER_PAGE,
        words_per_image: int = DEFAULT_WORDS_PER_IMAGE,
        min_words_per_page: int = DEFAULT_MIN_WORDS_PER_PAGE,
        max_pages: int = DEFAULT_MAX_PAGES,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        _validate(words_per_page, words_per_image, min_words_per_page, max_pages)
        self.words_per_page = words_per_page
        self.words_per_image = words_per_image
        self.min_words_per_page = min_words_per_page
        self.max_pages = max_pages
        self.metrics_hook = metrics_hook

    async def paginate(self, text: str) -> list[Page]:
        return self.split(text)

    def split(self, text: str) -> list[Page]:
        """Synchronous form of ``paginate``; nothing here ever suspends."""
        return paginate_by_words(
            text,
            words_per_page=self.words_per_page,
            words_per_image=self.words_per_image,
            min_words_per_page=self.min_words_per_page,
            max_pages=self.max_pages,
            metrics_hook=self.metrics_hook,
        )
