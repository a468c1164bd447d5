"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from the Book Model?
=========================================
1. Wire format: JSON uses camelCase (copiesAvailable), Python uses snake_case
2. Validation: Different rules for create vs update vs response
3. Documentation: Schemas generate the OpenAPI document

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from app.schemas.book import (
    BookCreate,
    BookDeleteResponse,
    BookResponse,
    BookUpdate,
)
from app.schemas.errors import (
    BOOK_NOT_FOUND,
    ROUTE_NOT_FOUND,
    ErrorResponse,
    describe_validation_error,
)

__all__ = [
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookDeleteResponse",
    # Error schemas
    "ErrorResponse",
    "describe_validation_error",
    "BOOK_NOT_FOUND",
    "ROUTE_NOT_FOUND",
]
