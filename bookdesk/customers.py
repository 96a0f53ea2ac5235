"""The customer register kept in a binary record file."""

from __future__ import annotations

from .records import Customer, PathLike, append_record, read_records, write_records


class CustomerRegistry:
    """Customers stored one fixed-size record after another in a file."""

    def __init__(self, path: PathLike) -> None:
        self.path = path

    def _load(self) -> list[Customer]:
        return read_records(self.path, Customer)

    def _in_use(self) -> list[Customer]:
        return [c for c in self._load() if c.customer_id != 0]

    def sort_by_name(self) -> None:
        """Rewrite the file with its records ordered by name."""
        customers = sorted(self._load(), key=lambda c: c.name.encode("utf-8"))
        write_records(self.path, customers)

    def list_all(self) -> list[Customer]:
        """Sort the file by name and return every customer in use."""
        self.sort_by_name()
        return self._in_use()

    def add(self, customer: Customer) -> None:
        """Append a customer to the file."""
        append_record(self.path, customer)

    def find(self, customer_id: int) -> Customer | None:
        """Return the first customer with this id, or None."""
        return next(
            (c for c in self._in_use() if c.customer_id == customer_id), None
        )

    def update(self, customer_id: int, customer: Customer) -> None:
        """Replace the first customer with this id; KeyError if there is none."""
        customers = self._load()
        for position, current in enumerate(customers):
            if current.customer_id != 0 and current.customer_id == customer_id:
                customers[position] = customer
                write_records(self.path, customers)
                return
        raise KeyError(customer_id)

    def remove(self, customer_id: int) -> int:
        """Drop every record with this id and return how many went."""
        customers = self._load()
        kept = [c for c in customers if c.customer_id != customer_id]
        write_records(self.path, kept)
        return len(customers) - len(kept)

    def search_by_name(self, name: str) -> list[Customer]:
        """Return every customer in use whose name matches exactly."""
        return [c for c in self._in_use() if c.name == name]

    def search_by_phone(self, phone_number: str) -> list[Customer]:
        """Return every customer in use whose phone number matches exactly."""
        return [c for c in self._in_use() if c.phone_number == phone_number]