"""Book entity, builder and validation error schemas."""

from datetime import date
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationError

# Exactly 13 ASCII digits
ISBN_PATTERN = r"^[0-9]+$"

Isbn = Annotated[str, StringConstraints(min_length=13, max_length=13, pattern=ISBN_PATTERN)]


class Book(BaseModel):
    """Bibliographic data for a single book, keyed by ISBN."""

    model_config = ConfigDict(frozen=True)

    isbn: Isbn = Field(description="13 digit ISBN", examples=["9781846883668"])
    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    published: Optional[date] = Field(default=None, description="Publication date")
    translator: Optional[str] = Field(default=None)
    summary: Optional[str] = Field(default=None)
    publisher: Optional[str] = Field(default=None)


class BookBuilder:
    """
    Accumulates field values and produces a Book.

    ``build()`` does not validate, so a builder can assemble a book that
    ``validate_book`` later rejects.
    """

    def __init__(self, isbn: Optional[str] = None) -> None:
        self._fields: dict[str, Any] = {name: None for name in Book.model_fields}
        self._fields["isbn"] = isbn

    @classmethod
    def from_book(cls, book: Book) -> "BookBuilder":
        """Seed a builder with every field of an existing book."""
        builder = cls()
        builder._fields.update(dict(book))
        return builder

    def isbn(self, isbn: Optional[str]) -> "BookBuilder":
        self._fields["isbn"] = isbn
        return self

    def title(self, title: Optional[str]) -> "BookBuilder":
        self._fields["title"] = title
        return self

    def author(self, author: Optional[str]) -> "BookBuilder":
        self._fields["author"] = author
        return self

    def published(self, published: Optional[date]) -> "BookBuilder":
        self._fields["published"] = published
        return self

    def translator(self, translator: Optional[str]) -> "BookBuilder":
        self._fields["translator"] = translator
        return self

    def summary(self, summary: Optional[str]) -> "BookBuilder":
        self._fields["summary"] = summary
        return self

    def publisher(self, publisher: Optional[str]) -> "BookBuilder":
        self._fields["publisher"] = publisher
        return self

    def build(self) -> Book:
        return Book.model_construct(**self._fields)


class ValidationErrorRecord(BaseModel):
    """One failed input constraint."""
    message: str = Field(description="Human readable description of the violation")
    path: str = Field(description="Dotted path of the field or parameter that failed")
    type: Optional[str] = Field(default=None, description="Constraint identifier")
    invalid_value: Any = Field(default=None, description="The rejected value")


class ErrorResponse(BaseModel):
    """Error body for internal failures."""
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Additional error details")
    status_code: int = Field(..., description="HTTP status code")


def violations_from(errors: list[dict], prefix: Optional[str] = None) -> list[ValidationErrorRecord]:
    """Convert pydantic error dicts into validation error records."""
    records = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if prefix:
            loc.insert(0, prefix)
        records.append(
            ValidationErrorRecord(
                message=error.get("msg", "Invalid value"),
                path=".".join(loc),
                type=error.get("type"),
                invalid_value=error.get("input"),
            )
        )
    return records


def validate_book(book: Book) -> list[ValidationErrorRecord]:
    """Check every field constraint of a book. Returns an empty list when valid."""
    try:
        Book.model_validate(dict(book))
    except ValidationError as e:
        return violations_from(e.errors(include_url=False), prefix="book")
    return []
