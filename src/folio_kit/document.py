# src/folio_kit/document.py

import logging
from bisect import bisect_right
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from folio_kit.measurement.base import MeasurementOracle
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook
from folio_kit.pagination.factory import create_paginator
from folio_kit.pagination.models import Page
from folio_kit.pagination.overview import build_overview
from folio_kit.pagination.structure import attach_structure
from folio_kit.parsers.markdown_parser import MarkdownParser
from folio_kit.parsers.models import Annotation, DocumentStructure, Heading, SectionTint
from folio_kit.settings import FolioSettings
from folio_kit.styling.colors import ColorResolver
from folio_kit.tokenizing.fragments import Fragment
from folio_kit.tokenizing.tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentModel:
    """Structure and pages of one document.

    Rebuilt from scratch for every render; never patched in place.
    """

    text: str
    structure: DocumentStructure
    pages: tuple[Page, ...]

    @property
    def headings(self) -> tuple[Heading, ...]:
        return self.structure.headings

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        return self.structure.annotations

    @property
    def section_stacks(self) -> Mapping[int, tuple[SectionTint, ...]]:
        return self.structure.section_stacks

    @property
    def heading_numbers(self) -> Mapping[int, str]:
        return self.structure.heading_numbers

    def fragments(self, page_number: int) -> Iterator[Fragment]:
        return tokenize(
            self.pages[page_number], document_annotations=self.annotations
        )

    def page_for_offset(self, offset: int) -> Page | None:
        """Last page starting at or before ``offset`` (first page if before all)."""
        if not self.pages:
            return None
        starts = [page.start_offset for page in self.pages]
        index = max(0, bisect_right(starts, offset) - 1)
        return self.pages[index]


async def build_document(
    text: str,
    settings: FolioSettings | None = None,
    *,
    oracle: MeasurementOracle | None = None,
    overview: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentModel:
    """Parse, paginate and attach structure in one pass.

    Args:
        text: The whole document.
        settings: Pagination and color settings; defaults when omitted.
        oracle: Measurement oracle, needed only for the adaptive strategy.
        overview: Return one page spanning the document instead of paginating.
        metrics_hook: Optional metrics hook for observability.
    """
    settings = settings or FolioSettings()
    colors = ColorResolver(settings.palette())
    structure = MarkdownParser(colors, metrics_hook).parse(text)

    if overview:
        pages = build_overview(text, structure.headings, structure.annotations)
    else:
        paginator = create_paginator(settings.pagination_config(), oracle, metrics_hook)
        pages = attach_structure(
            await paginator.paginate(text), structure.headings, structure.annotations
        )

    logger.info("Built document model: pages=%d, overview=%s", len(pages), overview)
    return DocumentModel(text=text, structure=structure, pages=tuple(pages))
