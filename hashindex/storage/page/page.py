from typing import Iterable, Iterator, List, Tuple

from ...core.exceptions import InvalidArgumentError


class Page:
    """
    A fixed-capacity container of records.

    The page is the unit of "disk" access in the cost model: a table scan
    pays one access per page it reads, and an index search pays one access
    for the page a bucket entry points to.

    Pages are immutable once created; the PageStore decides how records are
    distributed across them.
    """

    def __init__(self, page_number: int, capacity: int, records: Iterable[str] = ()):
        """
        Create a page.

        Args:
            page_number: Sequential number of this page within its store (0-based)
            capacity: Maximum number of records the page may hold
            records: Records in insertion order

        Raises:
            InvalidArgumentError: If capacity is not positive, the page number is
                negative, or more records are given than the page can hold
        """
        if capacity <= 0:
            raise InvalidArgumentError(f"Page capacity must be positive, got {capacity}")
        if page_number < 0:
            raise InvalidArgumentError(f"Page number must be non-negative, got {page_number}")

        self._page_number = page_number
        self._capacity = capacity
        self._records: Tuple[str, ...] = tuple(records)

        if len(self._records) > capacity:
            raise InvalidArgumentError(
                f"Page {page_number} holds {len(self._records)} records, capacity is {capacity}")

    @property
    def page_number(self) -> int:
        return self._page_number

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> Tuple[str, ...]:
        return self._records

    def get_page_number(self) -> int:
        return self._page_number

    def get_capacity(self) -> int:
        return self._capacity

    def get_records(self) -> List[str]:
        """Return a copy of the records on this page."""
        return list(self._records)

    def get_record(self, index: int) -> str:
        """
        Return the record at the given slot.

        Raises:
            IndexError: If the index is out of range
        """
        return self._records[index]

    def contains_record(self, search_key: str) -> bool:
        """Linear search of this page for an exact match."""
        return search_key in self._records

    def size(self) -> int:
        return len(self._records)

    def is_full(self) -> bool:
        return len(self._records) >= self._capacity

    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __contains__(self, search_key: object) -> bool:
        return search_key in self._records

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Page):
            return False
        return self._page_number == other._page_number

    def __hash__(self) -> int:
        return hash(self._page_number)

    def __str__(self) -> str:
        return (f"Page{{pageNumber={self._page_number}, capacity={self._capacity}, "
                f"recordCount={len(self._records)}}}")

    def __repr__(self) -> str:
        return f"Page(page_number={self._page_number}, capacity={self._capacity}, records={list(self._records)!r})"
