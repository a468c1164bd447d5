"""
Models Package

Domain records for the Books API.

Import from here:
    from app.models import Book, SEED_BOOKS
"""

from app.models.book import FIRST_FREE_ID, SEED_BOOKS, Book

__all__ = [
    "Book",
    "SEED_BOOKS",
    "FIRST_FREE_ID",
]
