# src/folio_kit/pagination/__init__.py

"""Pagination strategies for folio-kit.

Two interchangeable strategies share the Paginator protocol:
- fixed: deterministic word-count pages with an image penalty (default)
- adaptive: binary search against a measurement oracle (opt-in)

Example:
    >>> from folio_kit.pagination import PaginationConfig, create_paginator
    >>>
    >>> paginator = create_paginator(PaginationConfig(words_per_page=450))
    >>> pages = await paginator.paginate(text)
    >>> [page.word_count for page in pages]
"""

from .adaptive import AdaptivePaginator
from .base import Paginator
from .config import PaginationConfig, Strategy
from .factory import create_paginator
from .fixed import FixedWordPaginator, paginate_by_words
from .models import Page
from .overview import build_overview
from .structure import attach_structure, offset_for_ratio

__all__ = [
    # Factory
    "create_paginator",
    # Protocol
    "Paginator",
    # Config
    "PaginationConfig",
    "Strategy",
    # Strategies
    "AdaptivePaginator",
    "FixedWordPaginator",
    "paginate_by_words",
    # Types
    "Page",
    # Helpers
    "attach_structure",
    "build_overview",
    "offset_for_ratio",
]
