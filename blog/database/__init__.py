"""
Database module - SQLite operations for articles and comments.

Uses repository pattern for better separation of concerns.
"""

from .connection import DatabaseConnection
from .models import (
    NEW_ARTICLE_ID,
    Article,
    ArticleDraft,
    Comment,
    ExistingArticle,
    NewArticle,
)
from .sorting import resolve_sort
from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .database import Database

__all__ = [
    "Database",
    "DatabaseConnection",
    "NEW_ARTICLE_ID",
    "Article",
    "ArticleDraft",
    "Comment",
    "ExistingArticle",
    "NewArticle",
    "ArticleRepository",
    "CommentRepository",
    "resolve_sort",
]
