"""
Database facade - provides unified access to all repositories.
"""

from pathlib import Path

from .connection import DatabaseConnection
from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .models import Article, ArticleDraft, Comment
from .sorting import DEFAULT_ORDER, DEFAULT_SORT_BY


class Database:
    """Unified database access facade."""

    def __init__(self, db_path: Path):
        self.path = db_path
        self._connection = DatabaseConnection(db_path)

        # Initialize repositories
        self.articles = ArticleRepository(self._connection)
        self.comments = CommentRepository(self._connection)

    # ─────────────────────────────────────────────────────────────
    # Article operations (delegated to ArticleRepository)
    # ─────────────────────────────────────────────────────────────

    def get_articles(
        self,
        sort_by: str = DEFAULT_SORT_BY,
        order: str = DEFAULT_ORDER
    ) -> list[Article]:
        return self.articles.get_all(sort_by, order)

    def get_article(self, article_id: int) -> Article | None:
        return self.articles.get(article_id)

    def save_article(self, draft: ArticleDraft) -> int:
        return self.articles.save(draft)

    def add_or_update_article(self, article: Article) -> int:
        return self.articles.add_or_update(article)

    def delete_article(self, article_id: int):
        return self.articles.delete(article_id)

    def add_article_view(self, article_id: int) -> Article | None:
        return self.articles.add_view(article_id)

    # ─────────────────────────────────────────────────────────────
    # Comment operations
    # ─────────────────────────────────────────────────────────────

    def add_comment(self, article_id: int, pseudo: str, content: str) -> int:
        return self.comments.add(article_id, pseudo, content)

    def get_comments(self, article_id: int) -> list[Comment]:
        return self.comments.get_for_article(article_id)

    def delete_comment(self, comment_id: int):
        return self.articles.delete_comment(comment_id)

    def get_comment_count(self, article_id: int) -> int:
        return self.articles.get_comment_count(article_id)
