"""
Tests for the database facade, connection and configuration.
"""

import logging
import sqlite3

import pytest

from blog.config import config, get_db, init_db, setup_logging, state
from blog.database import Article, Database, ExistingArticle, NewArticle


class TestDatabaseFacade:
    """Tests for Database delegating methods."""

    def test_article_roundtrip(self, test_db):
        """Should save, read, view and delete through the facade."""
        article_id = test_db.save_article(NewArticle(id_user=7, title="Hello", content="World"))
        test_db.save_article(ExistingArticle(id=article_id, title="Hello!", content="World!"))
        test_db.add_article_view(article_id)

        article = test_db.get_article(article_id)
        assert article.title == "Hello!"
        assert article.views == 1

        test_db.delete_article(article_id)
        assert test_db.get_article(article_id) is None

    def test_add_or_update_article(self, test_db):
        """Sentinel dispatch should be available on the facade."""
        article_id = test_db.add_or_update_article(Article(id_user=1, title="A", content="B"))
        assert [a.id for a in test_db.get_articles("title", "asc")] == [article_id]

    def test_comments(self, test_db):
        """Should add, list, count and delete comments."""
        article_id = test_db.save_article(NewArticle(id_user=1, title="A", content="B"))
        comment_id = test_db.add_comment(article_id, "alice", "Nice")
        assert [c.id for c in test_db.get_comments(article_id)] == [comment_id]
        assert test_db.get_comment_count(article_id) == 1
        test_db.delete_comment(comment_id)
        assert test_db.get_comment_count(article_id) == 0

    def test_schema_is_reusable(self, temp_db_path):
        """Opening an existing file should keep its data."""
        first = Database(temp_db_path)
        article_id = first.save_article(NewArticle(id_user=1, title="Kept", content="Yes"))
        second = Database(temp_db_path)
        assert second.get_article(article_id).title == "Kept"

    def test_creates_parent_directory(self, tmp_path):
        """Should create missing directories for the db file."""
        db_path = tmp_path / "nested" / "blog.db"
        Database(db_path)
        assert db_path.exists()


class TestConnection:
    """Tests for DatabaseConnection."""

    def test_failed_block_is_not_committed(self, test_db):
        """An exception inside conn() should discard the block's writes."""
        with pytest.raises(sqlite3.OperationalError):
            with test_db._connection.conn() as conn:
                conn.execute(
                    "INSERT INTO article (id_user, title, content) VALUES (1, 'x', 'y')"
                )
                conn.execute("SELECT * FROM missing_table")
        assert test_db.get_articles() == []

    def test_views_default_to_zero(self, test_db):
        """Rows inserted without views should start at 0."""
        with test_db._connection.conn() as conn:
            conn.execute("INSERT INTO article (id_user, title, content) VALUES (1, 'x', 'y')")
        assert test_db.get_articles()[0].views == 0


class TestConfig:
    """Tests for configuration helpers."""

    def test_init_db_uses_given_path(self, monkeypatch, tmp_path):
        """init_db() should open the database and share it."""
        monkeypatch.setattr(state, "db", None)
        db = init_db(tmp_path / "blog.db")
        assert db.path == tmp_path / "blog.db"
        assert get_db() is db

    def test_init_db_defaults_to_config_path(self, monkeypatch, tmp_path):
        """init_db() without arguments should use Config.DB_PATH."""
        monkeypatch.setattr(state, "db", None)
        monkeypatch.setattr(config, "DB_PATH", tmp_path / "data" / "default.db")
        assert init_db().path == tmp_path / "data" / "default.db"

    def test_get_db_requires_initialization(self, monkeypatch):
        """get_db() should fail until a database is set."""
        monkeypatch.setattr(state, "db", None)
        with pytest.raises(RuntimeError, match="not initialized"):
            get_db()

    def test_get_db_returns_state(self, monkeypatch, test_db):
        """get_db() should return the shared database."""
        monkeypatch.setattr(state, "db", test_db)
        assert get_db() is test_db

    def test_setup_logging_sets_level(self):
        """setup_logging() should apply the level to the blog logger."""
        blog_logger = logging.getLogger("blog")
        original_level = blog_logger.level
        original_handlers = list(blog_logger.handlers)
        try:
            setup_logging("debug")
            assert blog_logger.level == logging.DEBUG
            assert len(blog_logger.handlers) == max(1, len(original_handlers))
        finally:
            for handler in blog_logger.handlers[:]:
                if handler not in original_handlers:
                    blog_logger.removeHandler(handler)
            blog_logger.setLevel(original_level)

