"""
Book Pydantic Schemas

Request and response shapes for the /api/books endpoints.

Validation rules:
- title / author: non-empty strings (checked after trimming, stored as sent)
- year: integer (integral JSON numbers such as 1999.0 count); bools, strings
  and null are rejected
- genre: string or null
- copiesAvailable: non-negative integer, defaults to 0 on create

Every rule raises a PydanticCustomError carrying the exact message the API
returns, so the exception handler in main.py can forward it unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

BOOK_FIELD_ERROR = "book_field"


def required_text_message(field_name: str) -> str:
    return f'Field "{field_name}" is required and must be a non-empty string.'


def _as_integer(value: Any) -> int | None:
    """Integer value of a JSON number, or None when it has a fraction or is not a number."""
    # bool is a subclass of int, but JSON true/false is not a number
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class BookFieldRules(BaseModel):
    """
    Shared field checks for create and update payloads.

    The checks run before type coercion (mode="before"), so a string such as
    "1999" is rejected instead of being converted to an int. JSON has a single
    number type, so 12.0 is accepted and stored as 12.
    A field that is absent from the body is never checked here;
    requiredness is expressed by the subclasses.
    """

    # Only wire names are read; snake_case keys fall under extra="ignore"
    model_config = ConfigDict(extra="ignore")

    @field_validator("title", "author", mode="before", check_fields=False)
    @classmethod
    def text_must_not_be_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError(BOOK_FIELD_ERROR, required_text_message(info.field_name))
        return v

    @field_validator("year", mode="before", check_fields=False)
    @classmethod
    def year_must_be_integer(cls, v: Any) -> Any:
        year = _as_integer(v)
        if year is None:
            raise PydanticCustomError(
                BOOK_FIELD_ERROR, 'Field "year" must be an integer if provided.'
            )
        return year

    @field_validator("genre", mode="before", check_fields=False)
    @classmethod
    def genre_must_be_string(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, str):
            raise PydanticCustomError(
                BOOK_FIELD_ERROR, 'Field "genre" must be a string if provided.'
            )
        return v

    @field_validator("copies_available", mode="before", check_fields=False)
    @classmethod
    def copies_must_be_non_negative(cls, v: Any) -> Any:
        copies = _as_integer(v)
        if copies is None or copies < 0:
            raise PydanticCustomError(
                BOOK_FIELD_ERROR,
                'Field "copiesAvailable" must be a non-negative integer if provided.',
            )
        return copies


class BookCreate(BookFieldRules):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Clean Code",
        "author": "Robert C. Martin",
        "year": 2008,
        "genre": "Tech",
        "copiesAvailable": 5
    }
    """

    title: str = Field(..., description="Book title", examples=["Clean Code"])
    author: str = Field(..., description="Author name", examples=["Robert C. Martin"])
    year: int | None = Field(
        default=None,
        description="Publication year",
        examples=[2008],
    )
    genre: str | None = Field(default=None, description="Genre label", examples=["Tech"])
    copies_available: int = Field(
        default=0,
        alias="copiesAvailable",
        description="Copies available for lending",
        examples=[5],
    )


class BookUpdate(BookFieldRules):
    """
    Schema for updating an existing book.

    Every field is optional. Only fields present in the body are applied,
    which is why routers read it with model_dump(exclude_unset=True).
    """

    title: str | None = Field(default=None, description="Book title")
    author: str | None = Field(default=None, description="Author name")
    year: int | None = Field(default=None, description="Publication year")
    genre: str | None = Field(default=None, description="Genre label (null clears it)")
    copies_available: int | None = Field(
        default=None,
        alias="copiesAvailable",
        description="Copies available for lending",
    )


class BookResponse(BaseModel):
    """
    Schema for book responses.

    Built from the in-memory Book dataclass (from_attributes=True).
    year and genre are always present, serialized as null when unknown.
    """

    id: int = Field(..., description="Unique identifier")
    title: str
    author: str
    year: int | None = None
    genre: str | None = None
    copies_available: int = Field(default=0, alias="copiesAvailable")

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Dune",
                "author": "Frank Herbert",
                "year": 1965,
                "genre": "Sci-Fi",
                "copiesAvailable": 3,
            }
        },
    )


class BookDeleteResponse(BaseModel):
    """Confirmation returned by DELETE, carrying the removed book."""

    message: str = Field(default="Book deleted successfully")
    book: BookResponse
