# src/folio_kit/pagination/overview.py

from collections.abc import Sequence

from folio_kit.parsers.markdown_parser import parse_annotations, parse_headings
from folio_kit.parsers.models import Annotation, Heading
from folio_kit.styling.colors import ColorResolver

from .models import Page
from .words import word_spans


def build_overview(
    text: str,
    headings: Sequence[Heading] | None = None,
    annotations: Sequence[Annotation] | None = None,
    colors: ColorResolver | None = None,
) -> list[Page]:
    """The whole document as a single page, for the continuous overview.

    No word-count splitting happens here, so section tints stay continuous
    across paragraphs. Headings and annotations are parsed when not given.
    """
    if not text or not text.strip():
        return []

    if headings is None:
        headings = parse_headings(text, colors)
    if annotations is None:
        annotations = parse_annotations(text, colors)

    return [
        Page(
            content=text,
            word_count=len(word_spans(text)),
            start_offset=0,
            end_offset=len(text),
            page_number=0,
            headings=tuple(sorted(headings, key=lambda h: h.start_offset)),
            annotations=tuple(sorted(annotations, key=lambda a: a.start_offset)),
        )
    ]
