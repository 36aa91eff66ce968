"""
Configuration and application state management.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .database import Database

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class Config:
    """Application configuration from environment."""
    DB_PATH: Path = Path(os.getenv("DB_PATH", "./data/blog.db"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


config = Config()


class AppState:
    """Shared application state."""
    db: "Database | None" = None


state = AppState()


def init_db(db_path: Path | None = None) -> "Database":
    """Open the database (config.DB_PATH by default) and share it through state."""
    from .database import Database

    state.db = Database(db_path or config.DB_PATH)
    logger.info(f"Database ready at {state.db.path}")
    return state.db


def get_db() -> "Database":
    """Get the shared database instance."""
    if not state.db:
        raise RuntimeError("Database not initialized")
    return state.db


def setup_logging(level: str | None = None) -> None:
    """Attach a stream handler to the blog logger at the configured level."""
    blog_logger = logging.getLogger("blog")
    blog_logger.setLevel((level or config.LOG_LEVEL).upper())
    if not blog_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        blog_logger.addHandler(handler)
