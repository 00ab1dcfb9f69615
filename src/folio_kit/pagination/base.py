# src/folio_kit/pagination/base.py

from typing import Protocol

from folio_kit.observability.base import MetricsHook

from .models import Page


class Paginator(Protocol):
    """Protocol for pagination strategies.

    Design principles:
    - Stateless between calls: every call receives the whole document
    - Verbatim: page content is never re-wrapped or normalized
    - Word-aligned: a boundary never falls inside a word
    - Non-fatal: degraded splits are fine, exceptions are not
    """

    metrics_hook: MetricsHook

    async def paginate(self, text: str) -> list[Page]:
        """Split ``text`` into ordered, non-overlapping pages.

        Returns:
            Pages numbered from 0. Empty or whitespace-only text gives [].
        """
        ...
