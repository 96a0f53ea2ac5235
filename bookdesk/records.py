"""Fixed-size binary records for books and customers, and the files holding them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Iterable, Protocol, Sequence, TypeVar, Union

FIELD_SIZE = 30
"""Bytes reserved for every text field, including its terminating NUL."""

PathLike = Union[str, Path]


class RecordFileError(OSError):
    """A record file could not be opened, read or written."""


def _encode(value: str) -> bytes:
    raw = value.encode("utf-8")
    if b"\0" in raw:
        raise ValueError(f"text field may not contain NUL: {value!r}")
    if len(raw) >= FIELD_SIZE:
        raise ValueError(
            f"text field longer than {FIELD_SIZE - 1} bytes: {value!r}"
        )
    return raw


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _pack(layout: struct.Struct, number: int, texts: Iterable[str]) -> bytes:
    try:
        return layout.pack(number, *(_encode(text) for text in texts))
    except struct.error as exc:
        raise ValueError(f"record id out of range: {number}") from exc


def _unpack(layout: struct.Struct, data: bytes) -> tuple[int, list[str]]:
    if len(data) != layout.size:
        raise ValueError(f"expected {layout.size} bytes, got {len(data)}")
    number, *texts = layout.unpack(data)
    return number, [_decode(text) for text in texts]


@dataclass
class Book:
    """One book entry. An id of 0 marks an unused slot."""

    book_id: int
    title: str = ""
    author: str = ""
    number: str = ""
    publisher: str = ""
    day: str = ""

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<i30s30s30s30s30s2x")
    SIZE: ClassVar[int] = FORMAT.size

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        return _pack(
            self.FORMAT,
            self.book_id,
            (self.title, self.author, self.number, self.publisher, self.day),
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Book":
        """Build a book from exactly SIZE bytes."""
        number, texts = _unpack(cls.FORMAT, data)
        return cls(number, *texts)


@dataclass
class Customer:
    """One customer entry. An id of 0 marks an unused slot."""

    customer_id: int
    account: str = ""
    password: str = ""
    name: str = ""
    phone_number: str = ""
    email: str = ""
    birth_date: str = ""

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<i30s30s30s30s30s30s")
    SIZE: ClassVar[int] = FORMAT.size

    def pack(self) -> bytes:
        """Return the record's on-disk bytes."""
        return _pack(
            self.FORMAT,
            self.customer_id,
            (
                self.account,
                self.password,
                self.name,
                self.phone_number,
                self.email,
                self.birth_date,
            ),
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Customer":
        """Build a customer from exactly SIZE bytes."""
        number, texts = _unpack(cls.FORMAT, data)
        return cls(number, *texts)


class _Record(Protocol):
    SIZE: ClassVar[int]

    def pack(self) -> bytes: ...


R = TypeVar("R", Book, Customer)


def read_records(path: PathLike, record_type: type[R]) -> list[R]:
    """Read every whole record from the file; a trailing partial record is ignored."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise RecordFileError(f"cannot open record file {path}") from exc
    size = record_type.SIZE
    return [
        record_type.unpack(data[offset : offset + size])
        for offset in range(0, len(data) - size + 1, size)
    ]


def write_records(path: PathLike, records: Sequence[_Record]) -> None:
    """Replace the file's contents with the given records."""
    payload = b"".join(record.pack() for record in records)
    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        raise RecordFileError(f"cannot write record file {path}") from exc


def append_record(path: PathLike, record: _Record) -> None:
    """Add one record to the end of the file, creating it if needed."""
    payload = record.pack()
    try:
        with open(path, "ab") as stream:
            stream.write(payload)
    except OSError as exc:
        raise RecordFileError(f"cannot append to record file {path}") from exc