# Document facade
from .document import DocumentModel, build_document

# Measurement
from .measurement import (
    HeuristicMeasurer,
    Measurement,
    MeasurementOracle,
    PageLayout,
    measurement_scope,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Pagination
from .pagination import (
    AdaptivePaginator,
    FixedWordPaginator,
    Page,
    PaginationConfig,
    Paginator,
    attach_structure,
    build_overview,
    create_paginator,
    paginate_by_words,
)

# Parsers
from .parsers import (
    Annotation,
    DocumentStructure,
    Heading,
    MarkdownParser,
    SectionMarker,
    SectionTint,
    compute_heading_numbers,
    compute_section_stacks,
    parse_annotations,
    parse_headings,
)

# Settings
from .settings import FolioSettings, LayoutSettings, load_settings

# Styling
from .styling import ColorPalette, ColorResolver

# Tokenizing
from .tokenizing import (
    AnnotationFragment,
    Fragment,
    HeadingFragment,
    ImageFragment,
    TextFragment,
    tokenize,
    tokenize_document,
)

__all__ = [
    # Document facade
    "DocumentModel",
    "build_document",
    # Measurement
    "HeuristicMeasurer",
    "Measurement",
    "MeasurementOracle",
    "PageLayout",
    "measurement_scope",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Pagination
    "AdaptivePaginator",
    "FixedWordPaginator",
    "Page",
    "PaginationConfig",
    "Paginator",
    "attach_structure",
    "build_overview",
    "create_paginator",
    "paginate_by_words",
    # Parsers
    "Annotation",
    "DocumentStructure",
    "Heading",
    "MarkdownParser",
    "SectionMarker",
    "SectionTint",
    "compute_heading_numbers",
    "compute_section_stacks",
    "parse_annotations",
    "parse_headings",
    # Settings
    "FolioSettings",
    "LayoutSettings",
    "load_settings",
    # Styling
    "ColorPalette",
    "ColorResolver",
    # Tokenizing
    "AnnotationFragment",
    "Fragment",
    "HeadingFragment",
    "ImageFragment",
    "TextFragment",
    "tokenize",
    "tokenize_document",
]
