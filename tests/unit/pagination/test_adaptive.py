import logging
from math import ceil

import pytest

from folio_kit.measurement.base import Measurement, PageLayout
from folio_kit.observability import names
from folio_kit.observability.base import InMemoryMetricsHook
from folio_kit.pagination.adaptive import AdaptivePaginator

TEXT = " ".join(["word"] * 200)


class LineOracle:
    """Synthetic oracle: one line per ``chars_per_line`` characters.

    With the ``layout`` fixture the page holds 10 lines of 40 characters,
    i.e. 80 five-character words ("word ").
    """

    def __init__(
        self,
        chars_per_line: int = 40,
        line_px: float = 20.0,
        failures: int = 0,
        height_override: float | None = None,
    ) -> None:
        self.chars_per_line = chars_per_line
        self.line_px = line_px
        self.failures = failures
        self.height_override = height_override
        self.calls: list[str] = []
        self.acquire_count = 0
        self.release_count = 0

    async def acquire(self, layout: PageLayout) -> None:
        self.acquire_count += 1

    async def measure(self, markdown: str, layout: PageLayout) -> Measurement:
        self.calls.append(markdown)
        if self.failures > 0:
            self.failures -= 1
            raise RuntimeError("render failed")
        if self.height_override is not None:
            return Measurement(height=self.height_override)
        lines = ceil(len(markdown) / self.chars_per_line)
        return Measurement(
            height=lines * self.line_px, word_count=len(markdown.split())
        )

    async def release(self) -> None:
        self.release_count += 1


@pytest.fixture
def layout() -> PageLayout:
    """200px of usable height, estimate of 108 words per page."""
    return PageLayout(
        width=400, height=300, padding_vertical=50, padding_horizontal=50, font_size=10
    )


@pytest.fixture
def oracle() -> LineOracle:
    return LineOracle()


class TestAdaptivePaginator:
    @pytest.mark.asyncio
    async def test_fills_pages_to_available_height(
        self, oracle: LineOracle, layout: PageLayout
    ) -> None:
        pages = await AdaptivePaginator(oracle, layout).paginate(TEXT)

        assert [p.word_count for p in pages] == [80, 80, 40]

    @pytest.mark.asyncio
    async def test_every_page_fits(self, oracle: LineOracle, layout: PageLayout) -> None:
        """Measured height of each page is within the available height."""
        pages = await AdaptivePaginator(oracle, layout).paginate(TEXT + " tail")

        checker = LineOracle()
        for page in pages:
            measurement = await checker.measure(page.content, layout)
            assert measurement.height <= layout.available_height

    @pytest.mark.asyncio
    async def test_pages_cover_all_words(
        self, oracle: LineOracle, layout: PageLayout
    ) -> None:
        text = "alpha  beta\n\ngamma " * 90
        pages = await AdaptivePaginator(oracle, layout).paginate(text)

        assert [w for p in pages for w in p.content.split()] == text.split()
        for page in pages:
            assert page.content == text[page.start_offset : page.end_offset]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "  \n "])
    async def test_empty_document(
        self, oracle: LineOracle, layout: PageLayout, text: str
    ) -> None:
        pages = await AdaptivePaginator(oracle, layout).paginate(text)

        assert pages == []
        assert oracle.acquire_count == 0

    @pytest.mark.asyncio
    async def test_iteration_cap_bounds_oracle_calls(self, layout: PageLayout) -> None:
        oracle = LineOracle()
        pages = await AdaptivePaginator(oracle, layout, max_iterations=2).paginate(
            TEXT
        )

        assert len(oracle.calls) <= len(pages) * 3
        assert sum(p.word_count for p in pages) == 200

    @pytest.mark.asyncio
    async def test_falls_back_to_minimum_viable_page(self, layout: PageLayout) -> None:
        """When nothing fits every page holds the minimum word count."""
        hook = InMemoryMetricsHook()
        oracle = LineOracle(height_override=10_000)
        pages = await AdaptivePaginator(oracle, layout, metrics_hook=hook).paginate(
            " ".join(["word"] * 25)
        )

        assert [p.word_count for p in pages] == [10, 10, 5]
        assert hook.counters[names.PAGINATION_FALLBACK_PAGES_TOTAL] == 3

    @pytest.mark.asyncio
    async def test_short_document_is_one_page(
        self, oracle: LineOracle, layout: PageLayout
    ) -> None:
        pages = await AdaptivePaginator(oracle, layout).paginate("just three words")

        assert len(pages) == 1
        assert pages[0].word_count == 3

    @pytest.mark.asyncio
    async def test_page_ceiling_truncates_with_warning(
        self, oracle: LineOracle, layout: PageLayout, caplog: pytest.LogCaptureFixture
    ) -> None:
        hook = InMemoryMetricsHook()
        with caplog.at_level(logging.WARNING):
            pages = await AdaptivePaginator(
                oracle, layout, max_pages=1, metrics_hook=hook
            ).paginate(TEXT)

        assert len(pages) == 1
        assert "truncated" in caplog.text
        assert hook.counters[names.PAGINATION_TRUNCATED_TOTAL] == 1


class TestAdaptivePaginatorOracleFailures:
    @pytest.mark.asyncio
    async def test_transient_failure_is_retried(self, layout: PageLayout) -> None:
        hook = InMemoryMetricsHook()
        oracle = LineOracle(failures=1)
        pages = await AdaptivePaginator(oracle, layout, metrics_hook=hook).paginate(
            TEXT
        )

        assert [p.word_count for p in pages] == [80, 80, 40]
        assert hook.counters[names.MEASUREMENT_FALLBACKS_TOTAL] == 0

    @pytest.mark.asyncio
    async def test_persistent_failure_uses_heuristic(
        self, layout: PageLayout, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Pagination completes on heuristic estimates when the oracle fails."""
        hook = InMemoryMetricsHook()
        oracle = LineOracle(failures=10_000)
        with caplog.at_level(logging.WARNING):
            pages = await AdaptivePaginator(
                oracle, layout, measure_attempts=2, metrics_hook=hook
            ).paginate(TEXT)

        assert sum(p.word_count for p in pages) == 200
        assert all(p.word_count > 0 for p in pages)
        assert hook.counters[names.MEASUREMENT_FALLBACKS_TOTAL] > 0
        assert "heuristic" in caplog.text
        assert oracle.release_count == 1

    @pytest.mark.asyncio
    async def test_each_measurement_tries_the_oracle_measure_attempts_times(
        self, layout: PageLayout
    ) -> None:
        oracle = LineOracle(failures=10_000)
        await AdaptivePaginator(oracle, layout, measure_attempts=3).paginate(
            "only four words here"
        )

        assert len(oracle.calls) % 3 == 0
        assert len(oracle.calls) > 0


class TestAdaptivePaginatorSession:
    @pytest.mark.asyncio
    async def test_each_call_acquires_and_releases(
        self, oracle: LineOracle, layout: PageLayout
    ) -> None:
        paginator = AdaptivePaginator(oracle, layout)
        await paginator.paginate(TEXT)
        await paginator.paginate(TEXT)

        assert oracle.acquire_count == 2
        assert oracle.release_count == 2

    @pytest.mark.asyncio
    async def test_session_holds_oracle_across_calls(
        self, oracle: LineOracle, layout: PageLayout
    ) -> None:
        async with AdaptivePaginator(oracle, layout) as paginator:
            await paginator.paginate(TEXT)
            await paginator.paginate("another short text")
            assert oracle.release_count == 0

        assert oracle.acquire_count == 1
        assert oracle.release_count == 1

    @pytest.mark.asyncio
    async def test_session_releases_on_error(
        self, oracle: LineOracle, layout: PageLayout
    ) -> None:
        with pytest.raises(RuntimeError, match="boom"):
            async with AdaptivePaginator(oracle, layout):
                raise RuntimeError("boom")

        assert oracle.release_count == 1


class TestAdaptivePaginatorValidation:
    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"max_iterations": 0}, "max_iterations must be > 0"),
            ({"min_viable_words": 0}, "min_viable_words must be > 0"),
            ({"measure_attempts": 0}, "measure_attempts must be > 0"),
            ({"max_pages": 0}, "max_pages must be > 0"),
        ],
    )
    def test_rejects_invalid_settings(
        self, oracle: LineOracle, layout: PageLayout, kwargs: dict, message: str
    ) -> None:
        with pytest.raises(ValueError, match=message):
            AdaptivePaginator(oracle, layout, **kwargs)
