# src/folio_kit/observability/names.py

"""Standard metric names for folio-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parsing Metrics
# ============================================================================

# Duration
PARSING_DURATION = "parsing_duration"

# Counters
PARSING_HEADINGS_FOUND = "parsing_headings_found"
PARSING_ANNOTATIONS_FOUND = "parsing_annotations_found"
PARSING_MARKERS_FOUND = "parsing_markers_found"


# ============================================================================
# Pagination Metrics
# ============================================================================

# Duration
PAGINATION_DURATION = "pagination_duration"

# Counters (pages accumulate over time)
PAGINATION_PAGES_CREATED = "pagination_pages_created"
PAGINATION_TRUNCATED_TOTAL = "pagination_truncated_total"
PAGINATION_FALLBACK_PAGES_TOTAL = "pagination_fallback_pages_total"

# Gauges
PAGINATION_SEARCH_ITERATIONS = "pagination_search_iterations"


# ============================================================================
# Measurement Metrics
# ============================================================================

# Duration
MEASUREMENT_DURATION = "measurement_duration"

# Counters
MEASUREMENT_CALLS_TOTAL = "measurement_calls_total"
MEASUREMENT_ERRORS_TOTAL = "measurement_errors_total"
MEASUREMENT_FALLBACKS_TOTAL = "measurement_fallbacks_total"


# ============================================================================
# Tokenizer Metrics
# ============================================================================

# Counters
TOKENIZER_FRAGMENTS_EMITTED = "tokenizer_fragments_emitted"
