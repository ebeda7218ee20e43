DEFAULT_CONTEXT_RADIUS = 80
MAX_MATCHES_PER_PAGE = 3

ELLIPSIS = "..."

# Joins page texts in the aggregated document text; never part of a token.
PAGE_SEPARATOR = "\n"
