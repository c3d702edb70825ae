# src/adoc_kit/observability/names.py

"""Standard metric names for adoc-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Chunking Metrics
# ============================================================================

# Duration
CHUNKING_DURATION = "chunking_duration"

# Counters (chunks accumulate over time)
CHUNKING_CHUNKS_CREATED = "chunking_chunks_created"
CHUNKING_DOCUMENTS_TOTAL = "chunking_documents_total"

# Counters (documents without usable sections, split as plain text)
CHUNKING_FALLBACK_TOTAL = "chunking_fallback_total"


# ============================================================================
# Section Metrics (AsciiDoc splitter)
# ============================================================================

# Counters
CHUNKING_SECTIONS_PARSED = "chunking_sections_parsed"
CHUNKING_SECTIONS_MERGED = "chunking_sections_merged"
CHUNKING_SECTIONS_OVERSIZED = "chunking_sections_oversized"
