"""The book catalogue kept in a binary record file."""

from __future__ import annotations

from .records import Book, PathLike, append_record, read_records, write_records


class BookCatalog:
    """Books stored one fixed-size record after another in a file."""

    def __init__(self, path: PathLike) -> None:
        self.path = path

    def _load(self) -> list[Book]:
        return read_records(self.path, Book)

    def sort_by_title(self) -> None:
        """Rewrite the file with its records ordered by title."""
        books = sorted(self._load(), key=lambda book: book.title.encode("utf-8"))
        write_records(self.path, books)

    def list_all(self) -> list[Book]:
        """Sort the file by title and return every book in use."""
        self.sort_by_title()
        return [book for book in self._load() if book.book_id != 0]

    def add(self, book: Book) -> None:
        """Append a book to the file."""
        append_record(self.path, book)

    def find(self, book_id: int) -> Book | None:
        """Return the first book with this id, or None."""
        return next(
            (b for b in self._load() if b.book_id != 0 and b.book_id == book_id),
            None,
        )

    def update(self, book_id: int, book: Book) -> None:
        """Replace the first book with this id; KeyError if there is none."""
        books = self._load()
        for position, current in enumerate(books):
            if current.book_id != 0 and current.book_id == book_id:
                books[position] = book
                write_records(self.path, books)
                return
        raise KeyError(book_id)

    def remove(self, book_id: int) -> int:
        """Drop every record with this id and return how many went."""
        books = self._load()
        kept = [book for book in books if book.book_id != book_id]
        write_records(self.path, kept)
        return len(books) - len(kept)

    def search_by_id(self, book_id: int) -> list[Book]:
        """Return every book in use with this id, in file order."""
        return [b for b in self._load() if b.book_id != 0 and b.book_id == book_id]