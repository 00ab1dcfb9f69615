"""Measurement oracle abstraction for content-fitting pagination.

Example:
    >>> from folio_kit.measurement import HeuristicMeasurer, PageLayout
    >>> from folio_kit.measurement import measurement_scope
    >>>
    >>> layout = PageLayout(width=600, height=800)
    >>> async with measurement_scope(HeuristicMeasurer(), layout) as oracle:
    ...     measurement = await oracle.measure("Some words", layout)
"""

from .base import Measurement, MeasurementOracle, PageLayout
from .heuristic import (
    HeuristicMeasurer,
    estimate_measurement,
    estimate_words_per_page,
)
from .session import measurement_scope

__all__ = [
    # Protocol
    "MeasurementOracle",
    # Types
    "Measurement",
    "PageLayout",
    # Heuristics
    "HeuristicMeasurer",
    "estimate_measurement",
    "estimate_words_per_page",
    # Session
    "measurement_scope",
]
