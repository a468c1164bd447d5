"""
Error Schemas

Every failure the API reports has the same body: {"error": "<message>"}.

describe_validation_error() turns the first pydantic/FastAPI validation
error into that message, so a client always sees one actionable sentence
naming the offending field instead of FastAPI's default 422 detail list.
"""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field

from app.schemas.book import BOOK_FIELD_ERROR, required_text_message

BOOK_NOT_FOUND = "Book not found"
ROUTE_NOT_FOUND = "Route not found"
BODY_NOT_OBJECT = "Request body must be a JSON object."
MALFORMED_JSON = "Malformed JSON in request body."


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., examples=[BOOK_NOT_FOUND])


def describe_validation_error(errors: Sequence[dict[str, Any]]) -> str:
    """
    Build the client-facing message for a failed request body.

    Errors arrive in field declaration order, so reporting the first one
    mirrors a check-one-field-at-a-time validator.

    Args:
        errors: RequestValidationError.errors() / ValidationError.errors()

    Returns:
        Human-readable message naming the offending field
    """
    if not errors:
        return BODY_NOT_OBJECT

    first = errors[0]
    error_type = first.get("type")
    loc = [part for part in first.get("loc", ()) if part != "body"]

    if error_type == "json_invalid":
        return MALFORMED_JSON
    if error_type == BOOK_FIELD_ERROR:
        return first["msg"]
    if not loc or not isinstance(loc[0], str):
        # The body itself is missing, or it is a list/string/number
        return BODY_NOT_OBJECT
    if error_type == "missing":
        return required_text_message(loc[0])
    return f'Field "{loc[0]}" is invalid: {first.get("msg", "invalid value")}.'
