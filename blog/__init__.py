"""
Blog data access

SQLite-backed storage for blog articles and their comments:
sorted listings with comment counts, article writes and view tracking.
"""

__version__ = "1.0.0"
