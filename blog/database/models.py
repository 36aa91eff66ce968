"""
Database models - dataclasses for blog entities.
"""

from dataclasses import dataclass
from datetime import datetime

# Id carried by an Article that has not been stored yet
NEW_ARTICLE_ID = -1


@dataclass
class Article:
    id_user: int
    title: str
    content: str
    id: int = NEW_ARTICLE_ID
    date_creation: datetime | None = None
    date_update: datetime | None = None
    views: int = 0
    comment_count: int = 0  # Derived from comment rows, never stored

    @property
    def is_new(self) -> bool:
        return self.id == NEW_ARTICLE_ID


@dataclass
class Comment:
    id: int
    id_article: int
    pseudo: str
    content: str
    date_creation: datetime | None = None


@dataclass(frozen=True)
class NewArticle:
    """An article to insert."""
    id_user: int
    title: str
    content: str


@dataclass(frozen=True)
class ExistingArticle:
    """Replacement title and content for a stored article."""
    id: int
    title: str
    content: str


ArticleDraft = NewArticle | ExistingArticle


def to_draft(article: Article) -> ArticleDraft:
    """Turn an Article into the write it stands for, based on its id."""
    if article.is_new:
        return NewArticle(id_user=article.id_user, title=article.title, content=article.content)
    return ExistingArticle(id=article.id, title=article.title, content=article.content)
