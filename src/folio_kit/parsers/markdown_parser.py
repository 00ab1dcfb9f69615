# parsers/markdown_parser.py

import logging
from time import monotonic

from folio_kit.observability import names
from folio_kit.observability.base import MetricsHook, NoOpMetricsHook, elapsed_ms
from folio_kit.styling.colors import ColorResolver

from .base import DocumentParser
from .models import COMMENT_TYPE, Annotation, DocumentStructure, Heading, SectionMarker
from .numbering import compute_heading_numbers
from .patterns import COMMENT_PATTERN, FLAG_PATTERN, HEADING_PATTERN, MARKER_PATTERN
from .stacks import compute_section_stacks

logger = logging.getLogger(__name__)


class MarkdownParser(DocumentParser):
    """
    Structural parser for the lightweight markup dialect.
    - Headings: "#" to "######" followed by whitespace
    - Section markers: "> [!TYPE] Title" next to a heading
    - Annotations: "==TYPE: message==" and "%% comment %%"
    Anything else passes through untouched.
    """

    def __init__(
        self,
        colors: ColorResolver | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.colors = colors or ColorResolver()
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> DocumentStructure:
        start = monotonic()
        headings = parse_headings(text, self.colors)
        annotations = parse_annotations(text, self.colors)

        structure = DocumentStructure(
            headings=tuple(headings),
            annotations=tuple(annotations),
            section_stacks=compute_section_stacks(headings),
            heading_numbers=compute_heading_numbers(headings),
        )

        markers = sum(1 for h in headings if h.marker is not None)
        self.metrics_hook.record_latency(names.PARSING_DURATION, elapsed_ms(start))
        self.metrics_hook.increment(names.PARSING_HEADINGS_FOUND, len(headings))
        self.metrics_hook.increment(names.PARSING_MARKERS_FOUND, markers)
        self.metrics_hook.increment(names.PARSING_ANNOTATIONS_FOUND, len(annotations))
        logger.info(
            "Parsed document: chars=%d, headings=%d, markers=%d, annotations=%d",
            len(text),
            len(headings),
            markers,
            len(annotations),
        )
        return structure


def parse_headings(text: str, colors: ColorResolver | None = None) -> list[Heading]:
    """Headings in document order, each with its attached section marker.

    A marker belongs to a heading when it is the first non-blank line after
    the heading line (blank lines may sit in between). A heading without
    such a marker picks up a marker sitting directly on the line above it,
    unless an earlier heading already claimed that marker.
    """
    colors = colors or ColorResolver()
    headings: list[Heading] = []
    claimed: set[int] = set()

    for match in HEADING_PATTERN.finditer(text):
        line_end = _line_end(text, match.start())
        marker = _marker_after(text, line_end, colors)
        if marker is not None:
            claimed.add(marker.start_offset)
        else:
            marker = _marker_before(text, match.start(), colors)
            if marker is not None and marker.start_offset in claimed:
                marker = None

        heading = Heading(
            level=len(match.group(1)),
            text=match.group(2).strip(),
            start_offset=match.start(),
            marker=marker,
        )
        logger.debug(
            "Heading at %d: level=%d, marker=%s",
            heading.start_offset,
            heading.level,
            marker.type if marker else None,
        )
        headings.append(heading)

    return headings


def parse_annotations(
    text: str, colors: ColorResolver | None = None
) -> list[Annotation]:
    """Flags and comments merged by offset.

    The two syntaxes are scanned independently over the raw text, so a flag
    inside a comment (or the reverse) is reported by both scans.
    """
    colors = colors or ColorResolver()
    annotations: list[Annotation] = []

    for match in FLAG_PATTERN.finditer(text):
        flag_type = match.group(1)
        annotations.append(
            Annotation(
                type=flag_type,
                message=match.group(2).strip(),
                start_offset=match.start(),
                end_offset=match.end(),
                color=colors.flag_color(flag_type),
                line_text=_line_at(text, match.start()),
            )
        )

    for match in COMMENT_PATTERN.finditer(text):
        annotations.append(
            Annotation(
                type=COMMENT_TYPE,
                message=match.group(1).strip(),
                start_offset=match.start(),
                end_offset=match.end(),
                color=colors.flag_color(COMMENT_TYPE),
                line_text=_line_at(text, match.start()),
            )
        )

    annotations.sort(key=lambda a: a.start_offset)
    return annotations


def _line_end(text: str, pos: int) -> int:
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def _line_at(text: str, pos: int) -> str:
    start = text.rfind("\n", 0, pos) + 1
    return text[start : _line_end(text, pos)].rstrip("\r")


def _match_marker(
    line: str, line_start: int, colors: ColorResolver
) -> SectionMarker | None:
    match = MARKER_PATTERN.match(line.rstrip("\r"))
    if not match:
        return None

    marker_type = match.group(1)
    title = match.group(3).strip() or marker_type.capitalize()
    return SectionMarker(
        type=marker_type,
        title=title,
        color=colors.section_color(marker_type),
        start_offset=line_start + (len(line) - len(line.lstrip())),
        fold=match.group(2),
    )


def _marker_after(
    text: str, heading_line_end: int, colors: ColorResolver
) -> SectionMarker | None:
    pos = heading_line_end + 1
    while pos < len(text):
        end = _line_end(text, pos)
        line = text[pos:end]
        if line.strip():
            return _match_marker(line, pos, colors)
        pos = end + 1
    return None


def _marker_before(
    text: str, heading_start: int, colors: ColorResolver
) -> SectionMarker | None:
    if heading_start == 0:
        return None
    prev_end = heading_start - 1
    prev_start = text.rfind("\n", 0, prev_end) + 1
    return _match_marker(text[prev_start:prev_end], prev_start, colors)
