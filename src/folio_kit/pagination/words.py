# src/folio_kit/pagination/words.py

from folio_kit.parsers.patterns import IMAGE_PATTERN, WORD_PATTERN

from .models import Page

WordSpan = tuple[int, int]


def word_spans(text: str) -> list[WordSpan]:
    """(start, end) offsets of every whitespace-delimited word."""
    return [match.span() for match in WORD_PATTERN.finditer(text)]


def count_images(text: str, start: int, end: int) -> int:
    """Image links lying entirely within ``text[start:end]``."""
    return sum(1 for _ in IMAGE_PATTERN.finditer(text, start, end))


def make_page(
    text: str,
    spans: list[WordSpan],
    first: int,
    stop: int,
    page_number: int,
) -> Page:
    """Page covering words ``spans[first:stop]``."""
    start_offset = spans[first][0]
    end_offset = spans[stop - 1][1]
    return Page(
        content=text[start_offset:end_offset],
        word_count=stop - first,
        start_offset=start_offset,
        end_offset=end_offset,
        page_number=page_number,
    )
