# parsers/numbering.py

from collections.abc import Iterable

from .models import Heading

MAX_HEADING_LEVEL = 6


def compute_heading_numbers(headings: Iterable[Heading]) -> dict[int, str]:
    """Dotted outline numbers ("1", "1.1", "2") keyed by heading offset.

    Deeper counters reset whenever a shallower heading appears. Levels that
    were skipped contribute no component, so a document opening with "##"
    numbers that heading "1".
    """
    counters = [0] * MAX_HEADING_LEVEL
    numbers: dict[int, str] = {}

    for heading in headings:
        index = min(max(heading.level, 1), MAX_HEADING_LEVEL) - 1
        counters[index] += 1
        for i in range(index + 1, MAX_HEADING_LEVEL):
            counters[i] = 0

        numbers[heading.start_offset] = ".".join(
            str(count) for count in counters[: index + 1] if count != 0
        )

    return numbers
