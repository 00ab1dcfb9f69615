# src/folio_kit/measurement/session.py

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from folio_kit.observability import names
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import MeasurementOracle, PageLayout
from .heuristic import HeuristicMeasurer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def measurement_scope(
    oracle: MeasurementOracle,
    layout: PageLayout,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> AsyncIterator[MeasurementOracle]:
    """Acquire the oracle's scratch area for the duration of the block.

    The oracle is released on every exit path, including exceptions raised
    inside the block. If acquisition itself fails, the block runs against a
    HeuristicMeasurer instead and there is nothing to release.
    """
    acquired = False
    try:
        await oracle.acquire(layout)
        acquired = True
    except Exception:
        logger.warning(
            "Could not acquire measurement oracle, using heuristic estimates",
            exc_info=True,
        )
        metrics_hook.increment(names.MEASUREMENT_ERRORS_TOTAL)

    if not acquired:
        yield HeuristicMeasurer()
        return

    logger.debug("Measurement oracle acquired")
    try:
        yield oracle
    finally:
        try:
            await oracle.release()
            logger.debug("Measurement oracle released")
        except Exception:
            logger.warning("Failed to release measurement oracle", exc_info=True)
            metrics_hook.increment(names.MEASUREMENT_ERRORS_TOTAL)
