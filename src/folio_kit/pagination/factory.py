# src/folio_kit/pagination/factory.py

from folio_kit.measurement.base import MeasurementOracle
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import Paginator
from .config import PaginationConfig


def create_paginator(
    config: PaginationConfig,
    oracle: MeasurementOracle | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Paginator:
    """Create a pagination strategy from config.

    Args:
        config: Pagination configuration naming the strategy and its knobs.
        oracle: Measurement oracle, required by the adaptive strategy.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured Paginator implementation.

    Raises:
        ValueError: If the strategy is unknown or needs a missing oracle.

    Example:
        >>> paginator = create_paginator(PaginationConfig(words_per_page=300))
        >>> pages = await paginator.paginate(text)
    """
    if config.strategy == "fixed":
        from .fixed import FixedWordPaginator

        return FixedWordPaginator(
            words_per_page=config.words_per_page,
            words_per_image=config.words_per_image,
            min_words_per_page=config.min_words_per_page,
            max_pages=config.max_pages,
            metrics_hook=metrics_hook,
        )

    if config.strategy == "adaptive":
        if oracle is None:
            raise ValueError("adaptive pagination requires a measurement oracle")

        from .adaptive import AdaptivePaginator

        return AdaptivePaginator(
            oracle,
            config.layout,
            max_iterations=config.max_iterations,
            min_viable_words=config.min_viable_words,
            measure_attempts=config.measure_attempts,
            max_pages=config.max_pages,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown pagination strategy: {config.strategy}")
