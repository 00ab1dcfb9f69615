# src/folio_kit/pagination/structure.py

from bisect import bisect_left
from collections.abc import Iterable
from dataclasses import replace
from typing import TypeVar

from folio_kit.parsers.models import Annotation, Heading

from .models import Page

_Item = TypeVar("_Item", Heading, Annotation)


def _within(items: list[_Item], offsets: list[int], page: Page) -> tuple[_Item, ...]:
    lo = bisect_left(offsets, page.start_offset)
    hi = bisect_left(offsets, page.end_offset)
    return tuple(items[lo:hi])


def attach_structure(
    pages: Iterable[Page],
    headings: Iterable[Heading],
    annotations: Iterable[Annotation],
) -> list[Page]:
    """New pages carrying the headings / annotations that start inside them."""
    sorted_headings = sorted(headings, key=lambda h: h.start_offset)
    sorted_annotations = sorted(annotations, key=lambda a: a.start_offset)
    heading_offsets = [h.start_offset for h in sorted_headings]
    annotation_offsets = [a.start_offset for a in sorted_annotations]

    return [
        replace(
            page,
            headings=_within(sorted_headings, heading_offsets, page),
            annotations=_within(sorted_annotations, annotation_offsets, page),
        )
        for page in pages
    ]


def offset_for_ratio(page: Page, ratio: float) -> int:
    """Absolute offset for a click ``ratio`` (0..1) down a rendered page."""
    ratio = min(1.0, max(0.0, ratio))
    span = max(1, page.end_offset - page.start_offset)
    return page.start_offset + round(span * ratio)
