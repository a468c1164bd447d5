"""
Services Package

Business logic kept separate from HTTP handling (routers), so it can be
tested without a client.

Current services:
- book_store.py: In-memory book collection with CRUD operations
"""

from app.services.book_store import BookNotFoundError, BookStore

__all__ = ["BookStore", "BookNotFoundError"]
