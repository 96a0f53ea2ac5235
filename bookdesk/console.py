"""Interactive menus for the book catalogue and the customer register."""

from __future__ import annotations

import sys
from collections import deque
from pathlib import Path
from typing import Callable, Sequence, TextIO

from .books import BookCatalog
from .customers import CustomerRegistry
from .records import Book, Customer, PathLike, RecordFileError

OPEN_ERROR = "파일 열기 오류"
RETRY = "다시 입력해주세요!"
WRONG_CHOICE = "잘못 입력했습니다."
GOODBYE = "종료"

BOOK_FIELDS = ("책id", "타이틀", "작가", "번호", "출판사", "날짜")
CUSTOMER_FIELDS = ("고객id", "계정", "비밀번호", "이름", "전화번호", "이메일", "출생년도")

WIDE_RULE = "=" * 61
NARROW_RULE = "=" * 40

BOOK_MENU = (
    " 1.List up All Book\n"
    " 2.Add New Book\n"
    " 3. Update Book\n"
    " 4. Remove a Book\n"
    " 5. Search Book Information by Title\n"
    " 0. Return to Main Menu"
)
CUSTOMER_MENU = (
    " 1.List up All Customers\n"
    " 2.Add New Customer\n"
    " 3. Update Customer\n"
    " 4. Remove a Customer\n"
    " 5. Search Customer Information by Name\n"
    " 6. Search Customer Information by Phone Number\n"
    " 0.Return to Main Menu"
)
MAIN_MENU = "1. Book Management\n2. Customer Management\n0. Exit"


class Console:
    """Whitespace-separated token input and line output over two text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr: TextIO = sys.stderr
        self._pending: deque[str] = deque()

    def _next_token(self) -> str:
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("input ended")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> int:
        """Read the next token as an integer; ValueError if it is not one."""
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None

    def read_words(self, count: int) -> list[str]:
        """Read the next `count` whitespace-separated words."""
        return [self._next_token() for _ in range(count)]

    def write(self, text: str = "") -> None:
        """Write one line."""
        print(text, file=self.stdout)

    def prompt(self, text: str) -> None:
        """Write text without a newline and flush it."""
        self.stdout.write(text)
        self.stdout.flush()

    def error(self, text: str) -> None:
        """Write one line to the error stream, after flushing pending output."""
        self.stdout.flush()
        self.stderr.write(f"{text}\n")
        self.stderr.flush()


def _row(values: Sequence[object]) -> str:
    return " ".join(f"{value!s:<12}" for value in values)


def format_book(book: Book) -> str:
    """One table row for a book."""
    return _row(
        (book.book_id, book.title, book.author, book.number, book.publisher, book.day)
    )


def format_customer(customer: Customer) -> str:
    """One table row for a customer."""
    return _row(
        (
            customer.customer_id,
            customer.account,
            customer.password,
            customer.name,
            customer.phone_number,
            customer.email,
            customer.birth_date,
        )
    )


def _can_open(path: PathLike) -> bool:
    try:
        with Path(path).open("rb"):
            return True
    except OSError:
        return False


def _file_ready(path: PathLike, console: Console) -> bool:
    """True if the data file can be opened; otherwise report the error."""
    if _can_open(path):
        return True
    console.error(OPEN_ERROR)
    return False


def _table_header(console: Console, fields: Sequence[str], rule: str) -> None:
    console.write(rule)
    console.write(_row(fields))
    console.write(rule)


def _read_book(console: Console) -> Book:
    book_id = console.read_int()
    return Book(book_id, *console.read_words(5))


def _read_customer(console: Console) -> Customer:
    customer_id = console.read_int()
    return Customer(customer_id, *console.read_words(6))


# Book actions


def _list_books(catalog: BookCatalog, console: Console) -> None:
    if not _file_ready(catalog.path, console):
        return
    console.write("1. ListUpAllBook")
    _table_header(console, BOOK_FIELDS, WIDE_RULE)
    for book in catalog.list_all():
        console.write(format_book(book))


def _add_book(catalog: BookCatalog, console: Console) -> None:
    console.write("2. AddNewBook")
    _table_header(console, BOOK_FIELDS, NARROW_RULE)
    console.prompt("AddBook : ")
    catalog.add(_read_book(console))


def _update_book(catalog: BookCatalog, console: Console) -> None:
    if not _file_ready(catalog.path, console):
        return
    console.write("수정할 책을 검색하세요(id로 검색) : ")
    book_id = console.read_int()
    current = catalog.find(book_id)
    if current is None:
        console.write(f"데이터 {book_id} 없음 ")
        return
    console.write(NARROW_RULE)
    console.write("{:>10} {:>6} {:>6} {:>13} {:>6} {:>10}".format(*BOOK_FIELDS))
    console.write(NARROW_RULE)
    console.write(
        f"{current.book_id:>10} {current.title:>6} {current.author:>6} "
        f"{current.number:>13} {current.publisher:>6} {current.day:>10}"
    )
    console.prompt("업데이트할 정보를 입력하세요 : ")
    catalog.update(book_id, _read_book(console))


def _remove_book(catalog: BookCatalog, console: Console) -> None:
    if not _file_ready(catalog.path, console):
        return
    console.prompt("삭제할 ID 검색 : ")
    catalog.remove(console.read_int())


def _search_book(catalog: BookCatalog, console: Console) -> None:
    if not _file_ready(catalog.path, console):
        return
    console.prompt("검색할 책의 id : ")
    book_id = console.read_int()
    _table_header(console, BOOK_FIELDS, NARROW_RULE)
    for book in catalog.search_by_id(book_id):
        console.write(format_book(book))


# Customer actions


def _list_customers(registry: CustomerRegistry, console: Console) -> None:
    if not _file_ready(registry.path, console):
        return
    console.write("")
    console.write("1. ListupAllCustomers")
    _table_header(console, CUSTOMER_FIELDS, WIDE_RULE)
    for customer in registry.list_all():
        console.write(format_customer(customer))


def _add_customer(registry: CustomerRegistry, console: Console) -> None:
    console.write("2. AddNewCustomer")
    _table_header(console, CUSTOMER_FIELDS, NARROW_RULE)
    console.prompt("AddCustomer : ")
    registry.add(_read_customer(console))


def _update_customer(registry: CustomerRegistry, console: Console) -> None:
    if not _file_ready(registry.path, console):
        return
    console.write("수정할 고객을 검색하세요(id로 검색) : ")
    customer_id = console.read_int()
    current = registry.find(customer_id)
    if current is None:
        console.write(f"데이터 {customer_id} 없음 ")
        return
    _table_header(console, CUSTOMER_FIELDS, NARROW_RULE)
    console.write(format_customer(current))
    console.prompt("업데이트할 정보를 입력하세요 : ")
    registry.update(customer_id, _read_customer(console))


def _remove_customer(registry: CustomerRegistry, console: Console) -> None:
    if not _file_ready(registry.path, console):
        return
    console.prompt("삭제할 ID 검색 : ")
    registry.remove(console.read_int())


def _search_customer_by_name(registry: CustomerRegistry, console: Console) -> None:
    if not _file_ready(registry.path, console):
        return
    console.prompt("검색할 이름 : ")
    (name,) = console.read_words(1)
    _table_header(console, CUSTOMER_FIELDS, NARROW_RULE)
    for customer in registry.search_by_name(name):
        console.write(format_customer(customer))


def _search_customer_by_phone(registry: CustomerRegistry, console: Console) -> None:
    if not _file_ready(registry.path, console):
        return
    console.prompt("검색할 전화번호 : ")
    (phone_number,) = console.read_words(1)
    _table_header(console, CUSTOMER_FIELDS, NARROW_RULE)
    for customer in registry.search_by_phone(phone_number):
        console.write(format_customer(customer))


def _run_menu(
    store: object,
    console: Console,
    text: str,
    actions: dict[int, Callable[..., None]],
    leading_blank: bool,
) -> None:
    while True:
        if leading_blank:
            console.write("")
        console.write(text)
        console.prompt("Choose menu : ")
        try:
            choice = console.read_int()
        except ValueError:
            console.write(RETRY)
            continue
        if choice == 0:
            return
        action = actions.get(choice)
        if action is None:
            console.write(RETRY)
            continue
        try:
            action(store, console)
        except ValueError as exc:
            console.write(f"{RETRY} ({exc})")
        except RecordFileError:
            console.error(OPEN_ERROR)


def book_menu(catalog: BookCatalog, console: Console) -> None:
    """Run the book management menu until 0 is chosen."""
    _run_menu(
        catalog,
        console,
        BOOK_MENU,
        {
            1: _list_books,
            2: _add_book,
            3: _update_book,
            4: _remove_book,
            5: _search_book,
        },
        leading_blank=True,
    )


def customer_menu(registry: CustomerRegistry, console: Console) -> None:
    """Run the customer management menu until 0 is chosen."""
    _run_menu(
        registry,
        console,
        CUSTOMER_MENU,
        {
            1: _list_customers,
            2: _add_customer,
            3: _update_customer,
            4: _remove_customer,
            5: _search_customer_by_name,
            6: _search_customer_by_phone,
        },
        leading_blank=False,
    )


def main_menu(book_path: PathLike, customer_path: PathLike, console: Console) -> None:
    """Offer the two managers until Exit is chosen or input runs out."""
    try:
        while True:
            console.write(MAIN_MENU)
            console.prompt("Choose num >> ")
            try:
                choice = console.read_int()
            except ValueError:
                console.write(WRONG_CHOICE)
                continue
            if choice == 1:
                book_menu(BookCatalog(book_path), console)
            elif choice == 2:
                customer_menu(CustomerRegistry(customer_path), console)
            elif choice == 0:
                console.write(GOODBYE)
                return
            else:
                console.write(WRONG_CHOICE)
    except EOFError:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Start the program with a book file and a customer file."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(f"{OPEN_ERROR} : bookdesk book.dat/customer.dat", file=sys.stderr)
        return 1
    main_menu(Path(args[0]), Path(args[1]), Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())