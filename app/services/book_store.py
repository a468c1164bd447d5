"""
Book Store Service

Owns the in-memory book collection and the id counter.

One BookStore instance is created per application (see main.create_app)
and handed to route handlers through dependency injection, so there is no
module-level mutable state and tests can build as many isolated apps as
they like.

Rules the store enforces:
- ids come from a monotonic counter and are never reused, even after delete
- the collection keeps insertion order; updates replace a record in place
- every public method runs under one lock, because FastAPI executes sync
  endpoints in a thread pool

Usage:
    store = BookStore()
    book = store.create_book(BookCreate(title="Clean Code", author="Robert C. Martin"))
    store.update_book(book.id, BookUpdate(copiesAvailable=2))
    store.delete_book(book.id)
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from app.models import FIRST_FREE_ID, SEED_BOOKS, Book
from app.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookNotFoundError(LookupError):
    """Raised when no book in the collection has the requested id."""

    def __init__(self, book_id: int | str):
        super().__init__(f"Book with id {book_id} not found")
        self.book_id = book_id


class BookStore:
    """
    In-memory collection of books.

    Books handed out by the store are copies; the only way to change the
    collection is through create_book/update_book/delete_book.
    """

    def __init__(self, seed: Iterable[Book] | None = SEED_BOOKS, next_id: int = FIRST_FREE_ID):
        self._lock = threading.Lock()
        self._seed = tuple(seed or ())
        self._first_id = max([next_id, *(book.id + 1 for book in self._seed)])
        self._books: list[Book] = []
        self._next_id = self._first_id
        self.reset()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _index_of(self, book_id: int) -> int:
        """Position of the book in the collection, or BookNotFoundError."""
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        raise BookNotFoundError(book_id)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------
    def list_books(self) -> list[Book]:
        """Return every book in insertion order."""
        with self._lock:
            return [replace(book) for book in self._books]

    def get_book(self, book_id: int) -> Book:
        """
        Get a book by ID.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            return replace(self._books[self._index_of(book_id)])

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------
    def create_book(self, book_data: BookCreate) -> Book:
        """
        Append a new book and assign it the next id.

        year and genre default to None, copies_available defaults to 0
        (the schema supplies that default).
        """
        with self._lock:
            book = Book(
                id=self._next_id,
                title=book_data.title,
                author=book_data.author,
                year=book_data.year,
                genre=book_data.genre,
                copies_available=book_data.copies_available,
            )
            self._next_id += 1
            self._books.append(book)

        logger.info(f"Created book {book.id}: {book.title!r}")
        return replace(book)

    def update_book(self, book_id: int, book_data: BookUpdate) -> Book:
        """
        Apply a partial update.

        Only fields present in the request body are replaced; id never changes.

        Raises:
            BookNotFoundError: If no book has this id
        """
        # model_dump(exclude_unset=True) returns only fields that were sent
        update_data = book_data.model_dump(exclude_unset=True)

        with self._lock:
            index = self._index_of(book_id)
            updated = replace(self._books[index], **update_data)
            self._books[index] = updated

        logger.debug(f"Updated book {book_id}: fields={sorted(update_data)}")
        return replace(updated)

    def delete_book(self, book_id: int) -> Book:
        """
        Remove a book permanently and return it.

        Raises:
            BookNotFoundError: If no book has this id
        """
        with self._lock:
            deleted = self._books.pop(self._index_of(book_id))

        logger.info(f"Deleted book {book_id}: {deleted.title!r}")
        return deleted

    def reset(self) -> None:
        """Restore the seed books and rewind the id counter."""
        with self._lock:
            self._books = [replace(book) for book in self._seed]
            self._next_id = self._first_id
