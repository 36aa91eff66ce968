"""
Database row converters - convert SQLite rows to dataclasses.
"""

import sqlite3
from datetime import datetime

from .models import Article, Comment


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def row_to_article(row: sqlite3.Row) -> Article:
    """Convert a database row to an Article."""
    # comment_count only exists on queries that aggregate it
    try:
        comment_count = row["comment_count"] or 0
    except (IndexError, KeyError):
        comment_count = 0

    return Article(
        id=row["id"],
        id_user=row["id_user"],
        title=row["title"],
        content=row["content"],
        date_creation=_parse_timestamp(row["date_creation"]),
        date_update=_parse_timestamp(row["date_update"]),
        views=row["views"] or 0,
        comment_count=comment_count,
    )


def row_to_comment(row: sqlite3.Row) -> Comment:
    """Convert a database row to a Comment."""
    return Comment(
        id=row["id"],
        id_article=row["id_article"],
        pseudo=row["pseudo"],
        content=row["content"],
        date_creation=_parse_timestamp(row["date_creation"]),
    )
