import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from .page import Page
from ...core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class PageStore:
    """
    An ordered, immutable sequence of pages.

    Pages are numbered 0..N-1 in creation order. Every page except
    possibly the last one is full, and an empty trailing page is never
    created, so a store over zero records holds zero pages.
    """

    def __init__(self, pages: Iterable[Page], page_capacity: int):
        self._pages: Tuple[Page, ...] = tuple(pages)
        self._page_capacity = page_capacity

    @classmethod
    def build(cls, records: Iterable[str], page_capacity: int) -> 'PageStore':
        """
        Partition records into fixed-capacity pages, preserving input order.

        Args:
            records: Records in the order they should be stored
            page_capacity: Maximum number of records per page

        Returns:
            The new page store

        Raises:
            InvalidArgumentError: If page_capacity is not a positive integer
        """
        if not isinstance(page_capacity, int) or page_capacity <= 0:
            raise InvalidArgumentError(f"Page size must be a positive integer, got {page_capacity!r}")

        pages: List[Page] = []
        current: List[str] = []

        for record in records:
            current.append(record)
            if len(current) == page_capacity:
                pages.append(Page(len(pages), page_capacity, current))
                current = []

        # Seal the partially filled tail, never an empty one
        if current:
            pages.append(Page(len(pages), page_capacity, current))

        store = cls(pages, page_capacity)
        logger.debug("Built page store: %d records in %d pages of capacity %d",
                     store.total_records(), len(pages), page_capacity)
        return store

    @property
    def page_capacity(self) -> int:
        return self._page_capacity

    def get_page(self, page_number: int) -> Page:
        """
        Return the page with the given number.

        Raises:
            IndexError: If no such page exists
        """
        if page_number < 0:
            raise IndexError(f"Page number must be non-negative, got {page_number}")
        return self._pages[page_number]

    def get_pages(self) -> List[Page]:
        return list(self._pages)

    def first(self) -> Optional[Page]:
        return self._pages[0] if self._pages else None

    def last(self) -> Optional[Page]:
        return self._pages[-1] if self._pages else None

    def num_pages(self) -> int:
        return len(self._pages)

    def total_records(self) -> int:
        return sum(page.size() for page in self._pages)

    def iter_records(self) -> Iterator[Tuple[str, int]]:
        """Yield (record, page_number) in page order, then slot order."""
        for page in self._pages:
            for record in page:
                yield record, page.page_number

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages)

    def __str__(self) -> str:
        return f"PageStore(pages={len(self._pages)}, page_capacity={self._page_capacity})"
