"""Fragment tokenizer: turns a page into the ordered stream a renderer draws.

Example:
    >>> from folio_kit.tokenizing import tokenize_document
    >>>
    >>> for fragment in tokenize_document("# Title\\n\\nBody ==TODO: fix=="):
    ...     print(fragment.kind, fragment.start_offset)
    heading 0
    text 9
    annotation 14
"""

from .fragments import (
    AnnotationFragment,
    Fragment,
    HeadingFragment,
    ImageFragment,
    TextFragment,
)
from .images import ImageResolver, PassthroughImageResolver, parse_markdown_image_link
from .tokenizer import sanitize_line, tokenize, tokenize_document

__all__ = [
    # Tokenizer
    "sanitize_line",
    "tokenize",
    "tokenize_document",
    # Fragments
    "AnnotationFragment",
    "Fragment",
    "HeadingFragment",
    "ImageFragment",
    "TextFragment",
    # Images
    "ImageResolver",
    "PassthroughImageResolver",
    "parse_markdown_image_link",
]
