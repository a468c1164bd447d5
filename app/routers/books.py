"""
Books Router

CRUD endpoints for the in-memory book collection:

    GET    /api/books          list every book
    GET    /api/books/{id}     fetch one book
    POST   /api/books          create a book
    PUT    /api/books/{id}     partially update a book
    DELETE /api/books/{id}     delete a book

Handlers stay thin: request bodies arrive already validated by the
schemas, lookups and mutations go through the BookStore, and failures
are raised as exceptions that main.py turns into {"error": ...} bodies.
"""

from fastapi import APIRouter, status

from app.dependencies import BookOr404, BookStoreDep
from app.schemas import (
    BookCreate,
    BookDeleteResponse,
    BookResponse,
    BookUpdate,
    ErrorResponse,
)

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book not found"},
    },
)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
    description="Get every book in the collection, in insertion order.",
)
def list_books(store: BookStoreDep) -> list[BookResponse]:
    """List all books. No pagination: the collection is small by nature."""
    return [BookResponse.model_validate(book) for book in store.list_books()]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    description="Retrieve a specific book.",
)
def get_book(book: BookOr404) -> BookResponse:
    return BookResponse.model_validate(book)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Add a book to the collection. title and author are required.",
    responses={400: {"model": ErrorResponse, "description": "Invalid payload"}},
)
def create_book(book_data: BookCreate, store: BookStoreDep) -> BookResponse:
    """
    Create a new book.

    The store assigns the id; year and genre come back as null when
    omitted and copiesAvailable as 0.

    Args:
        book_data: Validated book data from request body
        store: Book store (injected)

    Returns:
        The created book
    """
    book = store.create_book(book_data)
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update any subset of a book's fields. Omitted fields keep their value.",
    responses={400: {"model": ErrorResponse, "description": "Invalid field"}},
)
def update_book(
    book: BookOr404,
    store: BookStoreDep,
    book_data: BookUpdate | None = None,
) -> BookResponse:
    """
    Update an existing book.

    Uses PUT semantics but with optional fields (PATCH-like behavior).
    The book is resolved first, so a missing id is reported as 404
    before the body is looked at. A request without a body changes nothing.

    Args:
        book: Current version of the book (404 if absent)
        book_data: Fields to update (None when no body was sent)
        store: Book store (injected)

    Returns:
        Updated book
    """
    updated = store.update_book(book.id, book_data if book_data is not None else BookUpdate())
    return BookResponse.model_validate(updated)


@router.delete(
    "/{book_id}",
    response_model=BookDeleteResponse,
    summary="Delete a book",
    description="Permanently remove a book. The deleted book is echoed back.",
)
def delete_book(book: BookOr404, store: BookStoreDep) -> BookDeleteResponse:
    deleted = store.delete_book(book.id)
    return BookDeleteResponse(
        message="Book deleted successfully",
        book=BookResponse.model_validate(deleted),
    )
