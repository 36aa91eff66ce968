"""
Article repository - CRUD operations for articles.
"""

import logging
from datetime import datetime

from .connection import DatabaseConnection
from .converters import row_to_article
from .models import Article, ArticleDraft, ExistingArticle, NewArticle, to_draft
from .sorting import DEFAULT_ORDER, DEFAULT_SORT_BY, order_by_clause

logger = logging.getLogger(__name__)

_SELECT_WITH_COUNT = """
    SELECT a.*,
           (SELECT COUNT(*) FROM comment c WHERE c.id_article = a.id) AS comment_count
    FROM article a
"""


class ArticleRepository:
    """Repository for article operations."""

    def __init__(self, db: DatabaseConnection):
        self._db = db

    def get_all(
        self,
        sort_by: str = DEFAULT_SORT_BY,
        order: str = DEFAULT_ORDER
    ) -> list[Article]:
        """
        Get every article with its comment count.

        Unknown sort_by/order values fall back to date_creation/asc.
        """
        query = _SELECT_WITH_COUNT + order_by_clause(sort_by, order)
        with self._db.conn() as conn:
            rows = conn.execute(query).fetchall()
            return [row_to_article(row) for row in rows]

    def get(self, article_id: int) -> Article | None:
        """Get single article by ID."""
        with self._db.conn() as conn:
            row = conn.execute(
                _SELECT_WITH_COUNT + "WHERE a.id = :id", {"id": article_id}
            ).fetchone()
            return row_to_article(row) if row else None

    def save(self, draft: ArticleDraft) -> int:
        """Insert a NewArticle or update an ExistingArticle. Returns the article ID."""
        if isinstance(draft, NewArticle):
            return self._insert(draft)
        if isinstance(draft, ExistingArticle):
            self._update(draft)
            return draft.id
        raise TypeError(f"Cannot save {type(draft).__name__}")

    def add_or_update(self, article: Article) -> int:
        """Add the article if it has never been stored (id -1), update it otherwise."""
        return self.save(to_draft(article))

    def add(self, article: Article) -> int:
        """Add a new article. Returns article ID."""
        return self._insert(
            NewArticle(id_user=article.id_user, title=article.title, content=article.content)
        )

    def update(self, article: Article):
        """Update title and content. No-op if the article does not exist."""
        self._update(ExistingArticle(id=article.id, title=article.title, content=article.content))

    def delete(self, article_id: int):
        """Delete an article. Its comments are removed by the foreign key cascade."""
        with self._db.conn() as conn:
            cursor = conn.execute("DELETE FROM article WHERE id = :id", {"id": article_id})
            logger.debug(f"Deleted article {article_id} ({cursor.rowcount} row(s))")

    def add_view(self, article_id: int) -> Article | None:
        """Increment the view counter. Returns the updated article, or None if not found."""
        with self._db.conn() as conn:
            cursor = conn.execute(
                "UPDATE article SET views = views + 1 WHERE id = :id", {"id": article_id}
            )
            if cursor.rowcount == 0:
                return None
            row = conn.execute(
                _SELECT_WITH_COUNT + "WHERE a.id = :id", {"id": article_id}
            ).fetchone()
            return row_to_article(row) if row else None

    def delete_comment(self, comment_id: int):
        """Delete a single comment."""
        with self._db.conn() as conn:
            cursor = conn.execute("DELETE FROM comment WHERE id = :id", {"id": comment_id})
            logger.debug(f"Deleted comment {comment_id} ({cursor.rowcount} row(s))")

    def get_comment_count(self, article_id: int) -> int:
        """Get the number of comments on an article."""
        with self._db.conn() as conn:
            row = conn.execute(
                "SELECT COUNT(*) AS comment_count FROM comment WHERE id_article = :article_id",
                {"article_id": article_id}
            ).fetchone()
            return row["comment_count"] if row else 0

    def _insert(self, draft: NewArticle) -> int:
        with self._db.conn() as conn:
            cursor = conn.execute(
                """INSERT INTO article (id_user, title, content, date_creation)
                   VALUES (:id_user, :title, :content, :now)""",
                {
                    "id_user": draft.id_user,
                    "title": draft.title,
                    "content": draft.content,
                    "now": datetime.now().isoformat(),
                }
            )
            logger.debug(f"Inserted article {cursor.lastrowid} for user {draft.id_user}")
            return cursor.lastrowid

    def _update(self, draft: ExistingArticle):
        with self._db.conn() as conn:
            cursor = conn.execute(
                """UPDATE article SET title = :title, content = :content, date_update = :now
                   WHERE id = :id""",
                {
                    "title": draft.title,
                    "content": draft.content,
                    "now": datetime.now().isoformat(),
                    "id": draft.id,
                }
            )
            logger.debug(f"Updated article {draft.id} ({cursor.rowcount} row(s))")
