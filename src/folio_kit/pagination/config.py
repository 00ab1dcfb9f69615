# src/folio_kit/pagination/config.py

from dataclasses import dataclass, field
from typing import Literal

from folio_kit.measurement.base import PageLayout

Strategy = Literal["fixed", "adaptive"]


@dataclass(frozen=True)
class PaginationConfig:
    """Configuration for pagination strategies.

    Immutable. ``fixed`` is the default strategy; ``adaptive`` needs a
    measurement oracle and only reads the layout / search settings.
    """

    strategy: Strategy = "fixed"

    # fixed strategy
    words_per_page: int = 450
    words_per_image: int = 100
    min_words_per_page: int = 50

    # adaptive strategy
    layout: PageLayout = field(default_factory=PageLayout)
    max_iterations: int = 10
    min_viable_words: int = 10
    measure_attempts: int = 2

    # both
    max_pages: int = 10_000
