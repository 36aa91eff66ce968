"""
Sort parameter validation for article listings.

Sort keys and directions end up interpolated into SQL, so they are checked
against fixed allow-lists first. Unknown values are replaced with the
defaults instead of being rejected: a listing with a bad ``sort_by`` in the
query string still renders, just in the default order.
"""

DEFAULT_SORT_BY = "date_creation"
DEFAULT_ORDER = "asc"

# Sort key -> SQL expression, relative to "article a" with comment_count selected
SORT_COLUMNS = {
    "views": "a.views",
    "comments": "comment_count",
    "date_creation": "a.date_creation",
    "title": "a.title COLLATE NOCASE",
}

ORDERS = ("asc", "desc")


def resolve_sort(sort_by: str | None, order: str | None) -> tuple[str, str]:
    """Return a (sort_by, order) pair guaranteed to be in the allow-lists."""
    if not isinstance(sort_by, str) or sort_by not in SORT_COLUMNS:
        sort_by = DEFAULT_SORT_BY
    if order not in ORDERS:
        order = DEFAULT_ORDER
    return sort_by, order


def order_by_clause(sort_by: str | None, order: str | None) -> str:
    """Build the ORDER BY clause for a listing, ties broken by id."""
    sort_by, order = resolve_sort(sort_by, order)
    direction = order.upper()
    return f"ORDER BY {SORT_COLUMNS[sort_by]} {direction}, a.id {direction}"
