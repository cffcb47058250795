"""
Application-level constants for hardcoded business logic.

These values define API contracts and safety limits and should NEVER be
changed via environment variables. For configurable values (connection
pools, logging, default page size) see catalog/settings.py.
"""

# ============================================================================
# Pagination Safety Limits
# ============================================================================

# Maximum allowed page size for book search, requests above it are capped
# For default page size, see catalog/settings.py (DEFAULT_PAGE_SIZE)
MAX_PAGE_SIZE = 50


# ============================================================================
# Book Search Sorting
# ============================================================================

# Public sort field name -> Book column attribute name
BOOK_SORT_FIELDS: dict[str, str] = {
    "title": "title",
    "publishedYear": "published_year",
    "createdAt": "created_at",
}

DEFAULT_SORT_FIELD = "createdAt"

SORT_ORDERS = ("asc", "desc")

DEFAULT_SORT_ORDER = "desc"


# ============================================================================
# Request Tracing
# ============================================================================

# Correlation IDs are truncated to this many characters
CORRELATION_ID_LENGTH = 8

# Maximum size of a single structured log line in bytes
MAX_LOG_SIZE_BYTES = 100_000
