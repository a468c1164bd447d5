"""
Book Model

The only record type of the Books API.

Books live in memory for the lifetime of the process, so the model is a
plain dataclass rather than an ORM class. The store owns every instance;
routers never build or mutate a Book directly.

Field naming:
- Python attributes use snake_case (copies_available)
- The JSON wire format uses camelCase (copiesAvailable), handled by the schemas
"""

from dataclasses import dataclass


@dataclass
class Book:
    """
    A single book in the collection.

    Attributes:
        id: Assigned by the store, never changes and is never reused
        title: Non-empty book title
        author: Non-empty author name (several authors share one string)
        year: Publication year, None when unknown
        genre: Free-form genre label, None when unknown
        copies_available: Copies on the shelf, never negative
    """

    id: int
    title: str
    author: str
    year: int | None = None
    genre: str | None = None
    copies_available: int = 0


# =============================================================================
# Seed Data
# =============================================================================
# Loaded into the store on every process start (and on BookStore.reset()).
# The id counter continues after the highest seeded id.

SEED_BOOKS: tuple[Book, ...] = (
    Book(id=1, title="Dune", author="Frank Herbert", year=1965, genre="Sci-Fi", copies_available=3),
    Book(id=2, title="Dune Messiah", author="Frank Herbert", year=1969, genre="Sci-Fi", copies_available=2),
    Book(id=3, title="The Hobbit", author="J.R.R. Tolkien", year=1937, genre="Fantasy", copies_available=4),
    Book(
        id=4,
        title="The Pragmatic Programmer",
        author="Andrew Hunt; David Thomas",
        year=1999,
        genre="Tech",
        copies_available=1,
    ),
)

FIRST_FREE_ID = 5
