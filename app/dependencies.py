"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

WHY Dependency Injection?
=========================
1. Reusability: Write once, use in many routes
2. Testing: Each test app carries its own store on app.state
3. Separation of Concerns: Routes focus on HTTP, the store on the data
"""

import re
from typing import Annotated

from fastapi import Depends, Path, Request

from app.models import Book
from app.services.book_store import BookNotFoundError, BookStore

# Leading integer of a path segment: optional sign, then hex (0x..) or decimal digits
_LEADING_INTEGER = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(\d+))")


# =============================================================================
# Book Store
# =============================================================================
def get_book_store(request: Request) -> BookStore:
    """
    Return the BookStore owned by the running application.

    create_app() puts the store on app.state, so every request served by
    the same app instance shares one collection.
    """
    return request.app.state.book_store


BookStoreDep = Annotated[BookStore, Depends(get_book_store)]


# =============================================================================
# Path Lookups
# =============================================================================
def parse_book_id(raw: str) -> int | None:
    """
    Read the integer at the start of a path segment.

    Trailing characters are ignored, so "2abc" and "2.5" both mean 2.
    A "0x" prefix reads the digits as hexadecimal.

    Returns:
        The id, or None when the segment does not start with a number
    """
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return None
    sign, hex_digits, decimal_digits = match.groups()
    value = int(hex_digits, 16) if hex_digits else int(decimal_digits)
    return -value if sign == "-" else value


def get_book_or_404(
    store: BookStoreDep,
    book_id: Annotated[str, Path(description="ID of the book")],
) -> Book:
    """
    Resolve the {book_id} path parameter to a book.

    Dependencies are solved before the request body is validated, so
    PUT /api/books/{id} with an unknown id answers 404 even when the body
    would also fail validation.

    Raises:
        BookNotFoundError: Turned into a 404 response by main.py
    """
    parsed = parse_book_id(book_id)
    if parsed is None:
        raise BookNotFoundError(book_id)
    return store.get_book(parsed)


BookOr404 = Annotated[Book, Depends(get_book_or_404)]
