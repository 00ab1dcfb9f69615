# src/folio_kit/measurement/base.py

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class PageLayout:
    """Page box used for measuring and fitting content.

    All sizes are in pixels. Immutable. Explicit. No defaults from the host.
    """

    width: float = 800.0
    height: float = 1100.0
    padding_vertical: float = 48.0
    padding_horizontal: float = 56.0
    font_size: float = 16.0

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ValueError("font_size must be > 0")
        if self.available_width <= 0:
            raise ValueError("width must leave room for horizontal padding")
        if self.available_height <= 0:
            raise ValueError("height must leave room for vertical padding")

    @property
    def available_width(self) -> float:
        return self.width - 2 * self.padding_horizontal

    @property
    def available_height(self) -> float:
        return self.height - 2 * self.padding_vertical


@dataclass(frozen=True)
class Measurement:
    """Rendered metrics for one text fragment."""

    height: float
    image_count: int = 0
    image_heights: tuple[float, ...] = ()
    word_count: int = 0

    @property
    def total_image_height(self) -> float:
        return sum(self.image_heights)

    def fits(self, layout: PageLayout) -> bool:
        return self.height <= layout.available_height


class MeasurementOracle(Protocol):
    """Renders a fragment off-screen and reports its metrics.

    The oracle owns a scratch rendering area: ``acquire`` must run before the
    first ``measure`` and ``release`` once the session ends. Calls are issued
    one at a time, never concurrently.
    """

    async def acquire(self, layout: PageLayout) -> None: ...

    async def measure(self, markdown: str, layout: PageLayout) -> Measurement: ...

    async def release(self) -> None: ...
