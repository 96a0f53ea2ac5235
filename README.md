# bookdesk

An interactive console tool that keeps two record files: one of books and
one of customers. Each file is a plain sequence of fixed-size binary
records, with no header.

## Installing

    pip install .

## Running

    bookdesk book.dat customer.dat

Both file paths are required. With fewer than two arguments the command
prints a usage line to standard error and exits with status 1. The same
program can be started with `python -m bookdesk.console book.dat customer.dat`.

The main menu offers:

    1. Book Management
    2. Customer Management
    0. Exit

Any other number, or input that is not a number, asks again. The program
also ends when standard input runs out.

### Book management

1. List all books, sorted by title (the file is rewritten in sorted order)
2. Add a new book: an id followed by title, author, number, publisher and date
3. Update a book found by id (the first matching record is replaced)
4. Remove every book with a given id
5. Search for books by id
0. Return to the main menu

### Customer management

1. List all customers, sorted by name (the file is rewritten in sorted order)
2. Add a new customer: an id followed by account, password, name, phone
   number, e-mail and birth date (YYYYMMDD)
3. Update a customer found by id (the first matching record is replaced)
4. Remove every customer with a given id
5. Search for customers by name (exact match)
6. Search for customers by phone number (exact match)
0. Return to the main menu

Input is read as whitespace-separated words, so every text field is a single
word. A text field may hold at most 29 bytes of UTF-8; a longer one is
rejected and the menu is shown again. Records whose id is 0 stay in the file
but are left out of listings, searches and updates. Listing, updating,
removing and searching report an error if the data file cannot be opened;
adding creates the file when it does not exist.

## Using it from Python

    from bookdesk.records import Book
    from bookdesk.books import BookCatalog

    catalog = BookCatalog("book.dat")
    catalog.add(Book(1, "Dune", "Herbert", "0001", "Chilton", "19650801"))
    for book in catalog.list_all():
        print(book.title)

`BookCatalog` also has `sort_by_title`, `find`, `update` (raises `KeyError`
when no book has the id), `remove` (returns how many records were dropped)
and `search_by_id`.

`bookdesk.customers.CustomerRegistry` does the same for customer records,
with `sort_by_name`, `search_by_name` and `search_by_phone`.

The records are the dataclasses `bookdesk.records.Book` and
`bookdesk.records.Customer`. Their `pack` and `unpack` methods convert to and
from the on-disk layout: a little-endian 32-bit id followed by NUL-padded
30-byte text fields (a book record is 156 bytes, a customer record 184).
`read_records`, `write_records` and `append_record` work on whole files; a
file that cannot be opened or written raises
`bookdesk.records.RecordFileError`, a subclass of `OSError`.

`bookdesk.console` holds the menus (`main_menu`, `book_menu`,
`customer_menu`), the row formatters `format_book` and `format_customer`,
and `Console`, which reads tokens from and writes lines to any pair of text
streams.

## Limitations

- There is no locking: two programs editing the same file at once can lose
  changes.
- Customer passwords are stored in the file as plain text.
- Ids are not checked for uniqueness; several records may share one.

## Running the tests

    pip install .[test]
    pytest