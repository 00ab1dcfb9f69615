"""Structural parsing for the lightweight markup dialect.

Example:
    >>> from folio_kit.parsers import MarkdownParser
    >>>
    >>> structure = MarkdownParser().parse("# Title\\n\\nWork ==TODO: fix==.")
    >>> [h.text for h in structure.headings]
    ['Title']
    >>> structure.annotations[0].message
    'fix'
"""

from .base import DocumentParser
from .display import (
    annotation_display_text,
    first_words,
    heading_at_offset,
    line_from_offset,
    split_message,
)
from .markdown_parser import MarkdownParser, parse_annotations, parse_headings
from .models import (
    COMMENT_TYPE,
    Annotation,
    DocumentStructure,
    Heading,
    SectionMarker,
    SectionTint,
)
from .numbering import compute_heading_numbers
from .stacks import compute_section_stacks

__all__ = [
    # Parsers
    "DocumentParser",
    "MarkdownParser",
    "parse_annotations",
    "parse_headings",
    # Structure
    "compute_heading_numbers",
    "compute_section_stacks",
    # Types
    "COMMENT_TYPE",
    "Annotation",
    "DocumentStructure",
    "Heading",
    "SectionMarker",
    "SectionTint",
    # Display helpers
    "annotation_display_text",
    "first_words",
    "heading_at_offset",
    "line_from_offset",
    "split_message",
]
