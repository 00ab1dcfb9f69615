# src/folio_kit/tokenizing/tokenizer.py

import logging
import re
from collections.abc import Iterable, Iterator, Sequence

from folio_kit.observability import names
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook
from folio_kit.pagination.models import Page
from folio_kit.pagination.overview import build_overview
from folio_kit.parsers.models import Annotation, Heading
from folio_kit.parsers.patterns import COMMENT_PATTERN, FLAG_PATTERN, IMAGE_PATTERN

from .fragments import (
    AnnotationFragment,
    Fragment,
    HeadingFragment,
    ImageFragment,
    TextFragment,
)
from .images import parse_markdown_image_link

logger = logging.getLogger(__name__)

# Applied in order to every text line
_LINE_REWRITES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^#{1,6}\s+"), ""),
    (re.compile(r"^>\s*\[![^\]\s]+\][+-]?\s*"), ""),
    (re.compile(r"^(?:>\s*)+"), ""),
    (IMAGE_PATTERN, ""),
    (FLAG_PATTERN, ""),
    (COMMENT_PATTERN, ""),
    (re.compile(r"`([^`]+)`"), r"\1"),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    (re.compile(r"(?<!\w)_([^_]+)_(?!\w)"), r"\1"),
    (re.compile(r"~~([^~]+)~~"), r"\1"),
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),
]


def sanitize_line(line: str) -> str:
    """Plain display text for one source line."""
    for pattern, replacement in _LINE_REWRITES:
        line = pattern.sub(replacement, line)
    return " ".join(line.split())


def tokenize(
    page: Page,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    *,
    document_annotations: Iterable[Annotation] = (),
) -> Iterator[Fragment]:
    """Ordered fragments for one page.

    Walks the page left to right. Headings and annotations attached to the
    page become their own fragments; the gaps between them are broken into
    images and non-blank text lines. A heading consumes its line and any
    blank lines after it; an annotation consumes exactly its matched span.
    Fragment offsets are absolute and never decrease.

    Pass ``document_annotations`` to skip the tail of an annotation that
    started on an earlier page; otherwise that tail is shown as text.

    A pure function of the page, so it can be re-run for every render.
    """
    content = page.content
    base = page.start_offset
    items: list[Heading | Annotation] = sorted(
        [*page.headings, *page.annotations], key=lambda item: item.start_offset
    )

    emitted = 0
    cursor = _carried_over_end(page, document_annotations)
    for item in items:
        relative = item.start_offset - base
        if relative < 0 or relative >= len(content):
            continue

        if relative > cursor:
            for fragment in _text_and_images(content[cursor:relative], base + cursor):
                emitted += 1
                yield fragment

        emitted += 1
        if isinstance(item, Heading):
            yield HeadingFragment(heading=item)
            cursor = max(cursor, _heading_block_end(content, relative))
        else:
            yield AnnotationFragment(annotation=item)
            # nested annotations never move the cursor backwards
            cursor = max(cursor, min(len(content), item.end_offset - base))

    if cursor < len(content):
        for fragment in _text_and_images(content[cursor:], base + cursor):
            emitted += 1
            yield fragment

    metrics_hook.increment(names.TOKENIZER_FRAGMENTS_EMITTED, emitted)
    logger.debug("Tokenized page %d into %d fragments", page.page_number, emitted)


def tokenize_document(
    text: str,
    headings: Sequence[Heading] | None = None,
    annotations: Sequence[Annotation] | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Iterator[Fragment]:
    """Fragments for the whole document, as the continuous overview shows it."""
    for page in build_overview(text, headings, annotations):
        yield from tokenize(page, metrics_hook)


def _carried_over_end(page: Page, annotations: Iterable[Annotation]) -> int:
    """Page-relative end of annotations that began before the page."""
    end = 0
    for annotation in annotations:
        if annotation.start_offset < page.start_offset < annotation.end_offset:
            end = max(end, annotation.end_offset - page.start_offset)
    return min(end, len(page.content))


def _heading_block_end(content: str, start: int) -> int:
    """Offset just past the heading line at ``start`` and trailing blank lines."""
    newline = content.find("\n", start)
    if newline == -1:
        return len(content)

    pos = newline + 1
    while pos < len(content):
        newline = content.find("\n", pos)
        line_end = len(content) if newline == -1 else newline
        if content[pos:line_end].strip():
            break
        pos = line_end if newline == -1 else newline + 1
    return pos


def _text_and_images(segment: str, segment_start: int) -> Iterator[Fragment]:
    last = 0
    for match in IMAGE_PATTERN.finditer(segment):
        if match.start() > last:
            yield from _text_lines(segment[last : match.start()], segment_start + last)

        offset = segment_start + match.start()
        if match.group(2) is not None:
            yield ImageFragment(
                alt=match.group(1) or "",
                link=parse_markdown_image_link(match.group(2)),
                start_offset=offset,
            )
        else:
            target = match.group(3).strip()
            alt = (match.group(4) or "").strip()
            yield ImageFragment(alt=alt or target, link=target, start_offset=offset)

        last = match.end()

    if last < len(segment):
        yield from _text_lines(segment[last:], segment_start + last)


def _text_lines(text: str, start: int) -> Iterator[TextFragment]:
    pos = 0
    for raw in text.split("\n"):
        line_start = start + pos
        pos += len(raw) + 1

        stripped = raw.strip()
        if not stripped:
            continue
        line = sanitize_line(stripped)
        if line:
            indent = len(raw) - len(raw.lstrip())
            yield TextFragment(text=line, start_offset=line_start + indent)
