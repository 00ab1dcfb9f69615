# src/folio_kit/pagination/models.py

from dataclasses import dataclass

from folio_kit.parsers.models import Annotation, Heading


@dataclass(frozen=True)
class Page:
    """A contiguous, word-aligned slice of the source document.

    ``content`` is the verbatim slice ``text[start_offset:end_offset]``.
    Attached headings and annotations are those whose offsets fall inside
    ``[start_offset, end_offset)``, sorted by offset.
    """

    content: str
    word_count: int
    start_offset: int
    end_offset: int
    page_number: int
    headings: tuple[Heading, ...] = ()
    annotations: tuple[Annotation, ...] = ()
