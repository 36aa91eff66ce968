"""
Pytest fixtures for blog tests.
"""

import os
import tempfile
from pathlib import Path

import pytest

from blog.database import Database, NewArticle


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        yield Path(f.name)
    # Cleanup
    if os.path.exists(f.name):
        os.unlink(f.name)


@pytest.fixture
def test_db(temp_db_path):
    """Create a test database instance."""
    db = Database(temp_db_path)
    yield db


@pytest.fixture
def db_with_data(test_db):
    """Database with three articles and some comments."""
    banana_id = test_db.save_article(
        NewArticle(id_user=1, title="Banana", content="Yellow and curved.")
    )
    apple_id = test_db.save_article(
        NewArticle(id_user=1, title="Apple", content="Red or green.")
    )
    cherry_id = test_db.save_article(
        NewArticle(id_user=2, title="Cherry", content="Small and red.")
    )

    # apple: 2 comments, cherry: 1, banana: 0
    comment_ids = [
        test_db.add_comment(apple_id, "alice", "Crunchy!"),
        test_db.add_comment(apple_id, "bob", "I prefer pears."),
        test_db.add_comment(cherry_id, "carol", "Great in pies."),
    ]

    # views: banana 3, apple 1, cherry 0
    for _ in range(3):
        test_db.add_article_view(banana_id)
    test_db.add_article_view(apple_id)

    yield test_db, {
        "banana": banana_id,
        "apple": apple_id,
        "cherry": cherry_id,
        "comment_ids": comment_ids,
    }
