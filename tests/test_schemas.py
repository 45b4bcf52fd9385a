"""Tests for the book entity, builder and validation."""

from datetime import date

import pytest
from pydantic import ValidationError

from bookshelf.api.schemas.books import Book, BookBuilder, validate_book, violations_from


def test_book_is_immutable(sample_book):
    with pytest.raises(ValidationError):
        sample_book.title = "Changed"


def test_book_equality_is_by_value(sample_book):
    copy = Book(**sample_book.model_dump())
    assert copy == sample_book
    assert hash(copy) == hash(sample_book)
    assert copy != sample_book.model_copy(update={"title": "Other"})


def test_builder_builds_book():
    book = (
        BookBuilder("9788202289331")
        .title("Kurtby")
        .author("Loe, Erlend")
        .published(date(2008, 2, 1))
        .publisher("Cappelen")
        .build()
    )
    assert book == Book(
        isbn="9788202289331",
        title="Kurtby",
        author="Loe, Erlend",
        published=date(2008, 2, 1),
        publisher="Cappelen",
    )
    assert validate_book(book) == []


def test_builder_from_book_overrides_subset(sample_book):
    book = BookBuilder.from_book(sample_book).title("Kurtby II").translator("Someone").build()
    assert book.title == "Kurtby II"
    assert book.translator == "Someone"
    assert book.isbn == sample_book.isbn
    assert book.summary == sample_book.summary


def test_builder_does_not_validate():
    book = BookBuilder("97882021486xx").build()
    assert book.isbn == "97882021486xx"

    violations = validate_book(book)
    assert {v.path for v in violations} == {"book.isbn", "book.title", "book.author"}
    assert all(v.message for v in violations)


@pytest.mark.parametrize("isbn", ["97882021486", "97882021486830", "97882021486xx", "", None, "١٢٣٤٥٦٧٨٩٠١٢٣"])
def test_invalid_isbn(isbn):
    book = BookBuilder(isbn).title("T").author("A").build()
    violations = validate_book(book)
    assert len(violations) == 1
    assert violations[0].path == "book.isbn"
    assert violations[0].invalid_value == isbn


def test_constructor_rejects_invalid_isbn():
    with pytest.raises(ValidationError):
        Book(isbn="123", title="T", author="A")


def test_violations_from_joins_location():
    records = violations_from(
        [{"loc": ("body", "isbn"), "msg": "String should match pattern", "type": "string_pattern_mismatch", "input": "x"}]
    )
    assert len(records) == 1
    assert records[0].path == "body.isbn"
    assert records[0].type == "string_pattern_mismatch"
    assert records[0].invalid_value == "x"
