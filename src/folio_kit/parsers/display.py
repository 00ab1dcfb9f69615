# parsers/display.py

"""Display-time helpers shared by renderers.

None of these alter the parsed model; they only derive strings and
positions from it.
"""

from collections.abc import Sequence

from .models import Annotation, Heading
from .patterns import COMMENT_PATTERN, FLAG_PATTERN

MISSING_TYPE = "MISSING"


def split_message(message: str) -> tuple[str, str]:
    """Split ``"short | long"`` into its halves.

    Without a pipe both halves are the whole (trimmed) message.
    """
    if "|" not in message:
        whole = message.strip()
        return whole, whole
    short, long = message.split("|", 1)
    return short.strip(), long.strip()


def first_words(message: str, word_count: int) -> str:
    words = message.split()
    suffix = "..." if len(words) > word_count else ""
    return " ".join(words[:word_count]) + suffix


def annotation_display_text(annotation: Annotation, max_words: int = 10) -> str:
    """Short text a renderer shows for an annotation.

    ``MISSING`` flags describe their whole line, so the line is shown with
    the annotation markup removed.
    """
    short, _ = split_message(annotation.message)

    if annotation.type.upper() == MISSING_TYPE:
        line = FLAG_PATTERN.sub("", annotation.line_text)
        line = " ".join(COMMENT_PATTERN.sub("", line).split())
        return line or short or "Missing"

    return first_words(short, max_words)


def line_from_offset(text: str, offset: int) -> int:
    """0-based line number of ``offset`` in ``text``."""
    offset = min(max(offset, 0), len(text))
    return text.count("\n", 0, offset)


def heading_at_offset(headings: Sequence[Heading], offset: int) -> Heading | None:
    """Last heading starting at or before ``offset``.

    Falls back to the first heading when ``offset`` precedes all of them,
    and to None when there are no headings.
    """
    if not headings:
        return None

    candidate = headings[0]
    for heading in headings:
        if heading.start_offset > offset:
            break
        candidate = heading
    return candidate
