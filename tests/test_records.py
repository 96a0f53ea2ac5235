import pytest

from bookdesk.records import (
    Book,
    Customer,
    RecordFileError,
    append_record,
    read_records,
    write_records,
)


def make_customer(customer_id=1, name="Kim"):
    password = "password"
    return Customer(
        customer_id,
        account="kim01",
        password=password,
        name=name,
        phone_number="phone-a",
        email="kim@example.com",
        birth_date="19990101",
    )


def test_record_sizes_match_layout():
    assert Book.SIZE == 156
    assert Customer.SIZE == 184
    assert len(Book(1, "T").pack()) == Book.SIZE
    assert len(make_customer().pack()) == Customer.SIZE


def test_book_id_is_little_endian_int_at_start():
    data = Book(7, "Title").pack()
    assert data[:4] == b"\x07\x00\x00\x00"
    assert data[4:9] == b"Title"
    assert data[9] == 0


def test_book_round_trip():
    book = Book(12, "Dune", "Herbert", "978-x", "Ace", "1965")
    assert Book.unpack(book.pack()) == book


def test_customer_round_trip():
    customer = make_customer(5)
    assert Customer.unpack(customer.pack()) == customer


def test_unicode_round_trip():
    book = Book(3, "토지", "박경리", "n1", "출판", "1994")
    assert Book.unpack(book.pack()) == book


def test_field_too_long_rejected():
    with pytest.raises(ValueError):
        Book(1, "x" * 30).pack()


def test_field_at_limit_accepted():
    book = Book(1, "x" * 29)
    assert Book.unpack(book.pack()).title == "x" * 29


def test_nul_in_field_rejected():
    with pytest.raises(ValueError):
        Book(1, "a\0b").pack()


def test_id_out_of_range_rejected():
    with pytest.raises(ValueError):
        Book(2**31, "t").pack()


def test_unpack_wrong_length_rejected():
    with pytest.raises(ValueError):
        Book.unpack(b"\0" * (Book.SIZE - 1))


def test_write_and_read_records(tmp_path):
    path = tmp_path / "book.dat"
    books = [Book(1, "A"), Book(2, "B"), Book(0, "")]
    write_records(path, books)
    assert read_records(path, Book) == books
    assert path.stat().st_size == 3 * Book.SIZE


def test_append_creates_and_extends(tmp_path):
    path = tmp_path / "customer.dat"
    append_record(path, make_customer(1, "Lee"))
    append_record(path, make_customer(2, "Park"))
    names = [c.name for c in read_records(path, Customer)]
    assert names == ["Lee", "Park"]


def test_trailing_partial_record_ignored(tmp_path):
    path = tmp_path / "book.dat"
    path.write_bytes(Book(4, "Only").pack() + b"\x01\x02")
    assert read_records(path, Book) == [Book(4, "Only")]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(RecordFileError):
        read_records(tmp_path / "missing.dat", Book)


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(RecordFileError):
        write_records(tmp_path / "nope" / "book.dat", [Book(1, "A")])