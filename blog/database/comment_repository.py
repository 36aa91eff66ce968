"""
Comment repository - operations for article comments.
"""

import logging
from datetime import datetime

from .connection import DatabaseConnection
from .converters import row_to_comment
from .models import Comment

logger = logging.getLogger(__name__)


class CommentRepository:
    """Repository for comments attached to articles."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def add(self, article_id: int, pseudo: str, content: str) -> int:
        """
        Add a comment to an article. Returns comment ID.

        Raises sqlite3.IntegrityError if the article does not exist.
        """
        with self._db.conn() as conn:
            cursor = conn.execute(
                """INSERT INTO comment (id_article, pseudo, content, date_creation)
                   VALUES (:id_article, :pseudo, :content, :now)""",
                {
                    "id_article": article_id,
                    "pseudo": pseudo,
                    "content": content,
                    "now": datetime.now().isoformat(),
                }
            )
            logger.debug(f"Added comment {cursor.lastrowid} to article {article_id}")
            return cursor.lastrowid

    def get(self, comment_id: int) -> Comment | None:
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT * FROM comment WHERE id = :id", {"id": comment_id}
            ).fetchone()
            return row_to_comment(row) if row else None

    def get_for_article(self, article_id: int) -> list[Comment]:
        """Get an article's comments, oldest first."""
        with self._db.conn() as conn:
            rows = conn.execute(
                """SELECT * FROM comment WHERE id_article = :id_article
                   ORDER BY date_creation ASC, id ASC""",
                {"id_article": article_id}
            ).fetchall()
            return [row_to_comment(row) for row in rows]

