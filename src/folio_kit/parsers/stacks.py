# parsers/stacks.py

from collections.abc import Iterable
from dataclasses import dataclass

from .models import Heading, SectionTint


@dataclass(frozen=True)
class _OpenSection:
    level: int
    tint: SectionTint


def compute_section_stacks(
    headings: Iterable[Heading],
) -> dict[int, tuple[SectionTint, ...]]:
    """Map each heading's offset to the section markers open at that heading.

    A heading at level L closes every open section at level >= L, then opens
    its own marker (if any). Headings must be given in document order; they
    may come from several pages.
    """
    stack: list[_OpenSection] = []
    stacks: dict[int, tuple[SectionTint, ...]] = {}

    for heading in headings:
        while stack and stack[-1].level >= heading.level:
            stack.pop()

        if heading.marker is not None:
            stack.append(
                _OpenSection(
                    level=heading.level,
                    tint=SectionTint(
                        type=heading.marker.type, color=heading.marker.color
                    ),
                )
            )

        # snapshot
        stacks[heading.start_offset] = tuple(entry.tint for entry in stack)

    return stacks
