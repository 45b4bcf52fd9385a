"""API schemas."""

from bookshelf.api.schemas.books import (
    Book,
    BookBuilder,
    ErrorResponse,
    Isbn,
    ValidationErrorRecord,
    validate_book,
    violations_from,
)

__all__ = [
    "Book",
    "BookBuilder",
    "ErrorResponse",
    "Isbn",
    "ValidationErrorRecord",
    "validate_book",
    "violations_from",
]
