# src/folio_kit/pagination/adaptive.py

import logging
from contextlib import AsyncExitStack
from dataclasses import dataclass
from time import monotonic

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
)

from folio_kit.measurement.base import Measurement, MeasurementOracle, PageLayout
from folio_kit.measurement.heuristic import (
    estimate_measurement,
    estimate_words_per_page,
)
from folio_kit.measurement.session import measurement_scope
from folio_kit.observability import names
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook, elapsed_ms

from .fixed import DEFAULT_MAX_PAGES
from .models import Page
from .words import WordSpan, make_page, word_spans

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 10
DEFAULT_MIN_VIABLE_WORDS = 10
DEFAULT_MEASURE_ATTEMPTS = 2


@dataclass(frozen=True)
class _Trial:
    word_count: int
    measurement: Measurement
    fits: bool


class AdaptivePaginator:
    """Content-fitting pagination driven by a measurement oracle.

    For every page a starting word count is estimated from font metrics, then
    binary-searched within ``[min_viable_words, 2 * estimate]``: a slice that
    fits raises the lower bound, an overflowing one lowers the upper bound.
    The search stops after ``max_iterations`` measurements past the initial
    estimate. When nothing fits, the page holds ``min_viable_words`` words.

    Oracle calls are serial. A failing call is retried (``measure_attempts``
    in total) and then replaced by a heuristic estimate.

    Use as an async context manager to hold the oracle across several
    ``paginate`` calls; otherwise each call acquires and releases it.
    """

    def __init__(
        self,
        oracle: MeasurementOracle,
        layout: PageLayout,
        *,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        min_viable_words: int = DEFAULT_MIN_VIABLE_WORDS,
        measure_attempts: int = DEFAULT_MEASURE_ATTEMPTS,
        max_pages: int = DEFAULT_MAX_PAGES,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if max_iterations <= 0:
            raise ValueError("max_iterations must be > 0")
        if min_viable_words <= 0:
            raise ValueError("min_viable_words must be > 0")
        if measure_attempts <= 0:
            raise ValueError("measure_attempts must be > 0")
        if max_pages <= 0:
            raise ValueError("max_pages must be > 0")

        self.oracle = oracle
        self.layout = layout
        self.max_iterations = max_iterations
        self.min_viable_words = min_viable_words
        self.measure_attempts = measure_attempts
        self.max_pages = max_pages
        self.metrics_hook = metrics_hook

        self._exit_stack: AsyncExitStack | None = None
        self._session_oracle: MeasurementOracle | None = None

    async def __aenter__(self) -> "AdaptivePaginator":
        exit_stack = AsyncExitStack()
        self._session_oracle = await exit_stack.enter_async_context(
            measurement_scope(self.oracle, self.layout, self.metrics_hook)
        )
        self._exit_stack = exit_stack
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        exit_stack, self._exit_stack = self._exit_stack, None
        self._session_oracle = None
        if exit_stack is not None:
            await exit_stack.aclose()

    async def paginate(self, text: str) -> list[Page]:
        if not text or not text.strip():
            logger.debug("Empty document, no pages")
            return []

        if self._session_oracle is not None:
            return await self._paginate(text, self._session_oracle)

        async with measurement_scope(
            self.oracle, self.layout, self.metrics_hook
        ) as oracle:
            return await self._paginate(text, oracle)

    async def _paginate(self, text: str, oracle: MeasurementOracle) -> list[Page]:
        start = monotonic()
        spans = word_spans(text)
        estimate = estimate_words_per_page(self.layout)
        pages: list[Page] = []
        index = 0

        logger.info(
            "Adaptive pagination: words=%d, estimate=%d words/page",
            len(spans),
            estimate,
        )

        while index < len(spans):
            if len(pages) >= self.max_pages:
                logger.warning(
                    "Pagination truncated at %d pages, %d words left out",
                    self.max_pages,
                    len(spans) - index,
                )
                self.metrics_hook.increment(names.PAGINATION_TRUNCATED_TOTAL)
                break

            word_count = await self._fit_page(text, spans, index, estimate, oracle)
            stop = index + word_count
            pages.append(make_page(text, spans, index, stop, len(pages)))
            index = stop

        self.metrics_hook.record_latency(names.PAGINATION_DURATION, elapsed_ms(start))
        self.metrics_hook.increment(
            names.PAGINATION_PAGES_CREATED, len(pages), labels={"strategy": "adaptive"}
        )
        logger.info("Paginated %d words into %d pages", len(spans), len(pages))
        return pages

    async def _fit_page(
        self,
        text: str,
        spans: list[WordSpan],
        first: int,
        estimate: int,
        oracle: MeasurementOracle,
    ) -> int:
        """Number of words, starting at ``spans[first]``, that go on one page."""
        remaining = len(spans) - first
        floor = min(self.min_viable_words, remaining)
        low = floor
        high = max(floor, min(2 * estimate, remaining))
        best: _Trial | None = None

        candidate = max(floor, min(estimate, high))
        trial = await self._try(text, spans, first, candidate, oracle)
        if trial.fits:
            best, low = trial, trial.word_count
        else:
            high = trial.word_count - 1

        iterations = 0
        while low < high and iterations < self.max_iterations:
            mid = (low + high + 1) // 2
            trial = await self._try(text, spans, first, mid, oracle)
            if trial.fits:
                best, low = trial, mid
            else:
                high = mid - 1
            iterations += 1

        self.metrics_hook.record_gauge(names.PAGINATION_SEARCH_ITERATIONS, iterations)

        if best is None:
            logger.debug(
                "Nothing fits at word %d, using %d-word fallback page", first, floor
            )
            self.metrics_hook.increment(names.PAGINATION_FALLBACK_PAGES_TOTAL)
            return floor

        return best.word_count

    async def _try(
        self,
        text: str,
        spans: list[WordSpan],
        first: int,
        word_count: int,
        oracle: MeasurementOracle,
    ) -> _Trial:
        stop = min(first + word_count, len(spans))
        content = text[spans[first][0] : spans[stop - 1][1]]
        measurement = await self._measure(content, oracle)
        return _Trial(
            word_count=stop - first,
            measurement=measurement,
            fits=measurement.fits(self.layout),
        )

    async def _measure(self, content: str, oracle: MeasurementOracle) -> Measurement:
        start = monotonic()
        try:
            measurement = await self._measure_with_retries(content, oracle)
        except Exception:
            logger.warning(
                "Measurement failed after %d attempts, using heuristic estimate",
                self.measure_attempts,
                exc_info=True,
            )
            self.metrics_hook.increment(names.MEASUREMENT_ERRORS_TOTAL)
            self.metrics_hook.increment(names.MEASUREMENT_FALLBACKS_TOTAL)
            measurement = estimate_measurement(content, self.layout)

        self.metrics_hook.record_latency(names.MEASUREMENT_DURATION, elapsed_ms(start))
        self.metrics_hook.increment(names.MEASUREMENT_CALLS_TOTAL)
        return measurement

    async def _measure_with_retries(
        self, content: str, oracle: MeasurementOracle
    ) -> Measurement:
        """Call the oracle, retrying failed renders without waiting."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.measure_attempts),
            retry=retry_if_exception_type(Exception),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await oracle.measure(content, self.layout)
