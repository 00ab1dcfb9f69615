# parsers/models.py

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

COMMENT_TYPE = "COMMENT"


@dataclass(frozen=True)
class SectionMarker:
    """A callout (``> [!TYPE] Title``) attached to a heading."""

    type: str
    title: str
    color: str
    start_offset: int
    fold: str = ""  # "+", "-" or "" when no fold indicator was given


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    start_offset: int
    marker: SectionMarker | None = None


@dataclass(frozen=True)
class Annotation:
    """An inline flag (``==TYPE: message==``) or comment (``%% message %%``).

    ``end_offset`` is the exclusive end of the exact matched span.
    ``message`` is kept whole even when it carries a ``short | long`` pipe.
    """

    type: str
    message: str
    start_offset: int
    end_offset: int
    color: str
    line_text: str

    @property
    def is_comment(self) -> bool:
        return self.type == COMMENT_TYPE


@dataclass(frozen=True)
class SectionTint:
    """One open section marker in a heading's stack."""

    type: str
    color: str


@dataclass(frozen=True)
class DocumentStructure:
    """Everything the structural pass extracts from one document.

    All offsets are absolute into the parsed text. The per-heading maps are
    read-only views and are left out of the hash.
    """

    headings: tuple[Heading, ...]
    annotations: tuple[Annotation, ...]
    section_stacks: Mapping[int, tuple[SectionTint, ...]] = field(
        default_factory=dict, hash=False
    )
    heading_numbers: Mapping[int, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "section_stacks", MappingProxyType(dict(self.section_stacks))
        )
        object.__setattr__(
            self, "heading_numbers", MappingProxyType(dict(self.heading_numbers))
        )

