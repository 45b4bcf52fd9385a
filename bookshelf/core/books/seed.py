"""Seed dataset loaded into the book store at startup."""

from datetime import date

from bookshelf.api.schemas.books import Book

SEED_BOOKS = (
    Book(
        isbn="9781846883668",
        title="Travelling to Infinity: My Life with Stephen",
        author="Hawking, Jane",
        published=date(2007, 8, 1),
        publisher="Alma Books",
        summary="The inspiration for the film The Theory of Everything.",
    ),
    Book(
        isbn="9788202148683",
        title="Fisken",
        author="Jacobsen, Roy",
        published=date(1994, 1, 1),
        publisher="Cappelen",
    ),
    Book(
        isbn="9780099448822",
        title="Norwegian Wood",
        author="Murakami, Haruki",
        published=date(2000, 9, 7),
        translator="Rubin, Jay",
        publisher="Vintage",
    ),
    Book(
        isbn="9780099458326",
        title="Kafka on the Shore",
        author="Murakami, Haruki",
        published=date(2005, 8, 4),
        translator="Gabriel, Philip",
        publisher="Vintage",
    ),
    Book(
        isbn="9780099529125",
        title="Catch-22",
        author="Heller, Joseph",
        published=date(1994, 10, 6),
        publisher="Vintage",
    ),
    Book(
        isbn="9780099590088",
        title="Sapiens: A Brief History of Humankind",
        author="Harari, Yuval Noah",
        published=date(2015, 4, 30),
        publisher="Vintage",
    ),
    Book(
        isbn="9780571225385",
        title="Never Let Me Go",
        author="Ishiguro, Kazuo",
        published=date(2006, 2, 23),
        publisher="Faber & Faber",
    ),
    Book(
        isbn="9780141439518",
        title="Pride and Prejudice",
        author="Austen, Jane",
        published=date(2002, 12, 31),
        publisher="Penguin Classics",
    ),
    Book(
        isbn="9788203193538",
        title="Naive. Super",
        author="Loe, Erlend",
        published=date(1996, 1, 1),
        publisher="Cappelen",
    ),
    Book(
        isbn="9780330508117",
        title="The Road",
        author="McCarthy, Cormac",
        published=date(2010, 1, 8),
        publisher="Picador",
    ),
    Book(
        isbn="9780007119318",
        title="The Alchemist",
        author="Coelho, Paulo",
        published=date(2002, 4, 15),
        translator="Clarke, Alan R.",
        publisher="HarperCollins",
    ),
    Book(
        isbn="9781782276258",
        title="The Vegetarian",
        author="Han, Kang",
        published=date(2015, 1, 1),
        translator="Smith, Deborah",
        publisher="Portobello Books",
    ),
)


def seed_books() -> list[Book]:
    """Books the store starts with."""
    return list(SEED_BOOKS)
