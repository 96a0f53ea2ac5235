import pytest

from bookdesk.books import BookCatalog
from bookdesk.records import Book, RecordFileError, read_records


@pytest.fixture
def catalog(tmp_path):
    cat = BookCatalog(tmp_path / "book.dat")
    cat.add(Book(3, "Zebra", "A1", "N1", "P1", "2001"))
    cat.add(Book(1, "Apple", "A2", "N2", "P2", "2002"))
    cat.add(Book(2, "Mango", "A3", "N3", "P3", "2003"))
    return cat


def test_add_appends_in_order(catalog):
    ids = [b.book_id for b in read_records(catalog.path, Book)]
    assert ids == [3, 1, 2]


def test_list_all_sorted_by_title(catalog):
    titles = [b.title for b in catalog.list_all()]
    assert titles == ["Apple", "Mango", "Zebra"]


def test_list_all_rewrites_file_sorted(catalog):
    catalog.list_all()
    ids = [b.book_id for b in read_records(catalog.path, Book)]
    assert ids == [1, 2, 3]


def test_list_all_hides_empty_slots_but_keeps_them(catalog):
    catalog.add(Book(0, "Blank"))
    listed = catalog.list_all()
    assert all(b.book_id != 0 for b in listed)
    assert len(read_records(catalog.path, Book)) == 4


def test_sort_by_title_byte_order(tmp_path):
    cat = BookCatalog(tmp_path / "book.dat")
    cat.add(Book(1, "b"))
    cat.add(Book(2, "B"))
    cat.sort_by_title()
    assert [b.title for b in read_records(cat.path, Book)] == ["B", "b"]


def test_find(catalog):
    assert catalog.find(2) == Book(2, "Mango", "A3", "N3", "P3", "2003")
    assert catalog.find(99) is None


def test_find_ignores_zero_id(tmp_path):
    cat = BookCatalog(tmp_path / "book.dat")
    cat.add(Book(0, "Blank"))
    assert cat.find(0) is None


def test_update_replaces_in_place(catalog):
    catalog.update(1, Book(7, "Banana", "A9", "N9", "P9", "2009"))
    ids = [b.book_id for b in read_records(catalog.path, Book)]
    assert ids == [3, 7, 2]
    assert catalog.find(7).title == "Banana"
    assert catalog.find(1) is None


def test_update_only_first_match(tmp_path):
    cat = BookCatalog(tmp_path / "book.dat")
    cat.add(Book(5, "First"))
    cat.add(Book(5, "Second"))
    cat.update(5, Book(5, "Changed"))
    assert [b.title for b in cat.search_by_id(5)] == ["Changed", "Second"]


def test_update_missing_raises(catalog):
    with pytest.raises(KeyError):
        catalog.update(42, Book(42, "X"))


def test_remove(catalog):
    assert catalog.remove(3) == 1
    assert [b.book_id for b in read_records(catalog.path, Book)] == [1, 2]


def test_remove_all_duplicates(tmp_path):
    cat = BookCatalog(tmp_path / "book.dat")
    cat.add(Book(5, "A"))
    cat.add(Book(6, "B"))
    cat.add(Book(5, "C"))
    assert cat.remove(5) == 2
    assert read_records(cat.path, Book) == [Book(6, "B")]


def test_remove_absent_keeps_all(catalog):
    assert catalog.remove(50) == 0
    assert len(read_records(catalog.path, Book)) == 3


def test_search_by_id(catalog):
    catalog.add(Book(2, "Other"))
    assert [b.title for b in catalog.search_by_id(2)] == ["Mango", "Other"]
    assert catalog.search_by_id(8) == []


def test_missing_file_errors(tmp_path):
    cat = BookCatalog(tmp_path / "absent.dat")
    with pytest.raises(RecordFileError):
        cat.list_all()
    with pytest.raises(RecordFileError):
        cat.search_by_id(1)
    with pytest.raises(RecordFileError):
        cat.update(1, Book(1, "A"))