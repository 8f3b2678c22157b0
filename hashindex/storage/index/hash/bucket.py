from dataclasses import dataclass
from typing import Iterator, List, Optional

from ....core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class BucketEntry:
    """Maps a search key to the number of the page that holds it."""
    key: str
    page_number: int

    def __str__(self) -> str:
        return f"({self.key} -> Page {self.page_number})"


class BucketSegment:
    """
    A fixed-capacity run of entries.

    Every bucket has one main segment; further segments are overflow
    segments that share the bucket's number and capacity.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.entries: List[BucketEntry] = []

    def is_full(self) -> bool:
        return len(self.entries) >= self.capacity

    def is_empty(self) -> bool:
        return not self.entries

    def insert_entry(self, entry: BucketEntry) -> bool:
        """Append an entry; return False if the segment is already full."""
        if self.is_full():
            return False
        self.entries.append(entry)
        return True

    def find_entry(self, key: str) -> Optional[BucketEntry]:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)


class Bucket:
    """
    A bucket of the static hash index with chained overflow.

    The overflow chain is kept as an owned list of segments:
    segments[0] is the main segment and segments[1:] are the overflow
    segments in the order they were created. Only the last segment can
    have free space, since entries are only ever appended.
    """

    def __init__(self, bucket_number: int, capacity: int):
        if capacity <= 0:
            raise InvalidArgumentError(f"Bucket capacity must be positive, got {capacity}")

        self.bucket_number = bucket_number
        self.capacity = capacity
        self.segments: List[BucketSegment] = [BucketSegment(capacity)]

    @property
    def main_segment(self) -> BucketSegment:
        return self.segments[0]

    def add_entry(self, entry: BucketEntry) -> None:
        """Add an entry, chaining a new overflow segment when every segment is full."""
        for segment in self.segments:
            if segment.insert_entry(entry):
                return

        overflow = BucketSegment(self.capacity)
        overflow.insert_entry(entry)
        self.segments.append(overflow)

    def find_entry(self, key: str) -> Optional[BucketEntry]:
        """
        Search the main segment, then each overflow segment in chain order.

        The first exact match wins, so duplicate keys resolve to the
        earliest inserted entry.
        """
        for segment in self.segments:
            entry = segment.find_entry(key)
            if entry is not None:
                return entry
        return None

    def find_page(self, key: str) -> Optional[int]:
        """Return the page number recorded for the key, or None if absent."""
        entry = self.find_entry(key)
        return entry.page_number if entry is not None else None

    def get_page_number(self, key: str) -> int:
        """Like find_page(), but returns -1 when the key is absent."""
        page_number = self.find_page(key)
        return page_number if page_number is not None else -1

    def get_entries(self) -> List[BucketEntry]:
        """Return a copy of the main segment's entries."""
        return list(self.main_segment.entries)

    def iter_entries(self) -> Iterator[BucketEntry]:
        """Yield every entry, main segment first, in insertion order."""
        for segment in self.segments:
            yield from segment.entries

    def get_overflow_segments(self) -> List[BucketSegment]:
        return list(self.segments[1:])

    def get_total_entries(self) -> int:
        return sum(len(segment) for segment in self.segments)

    def get_overflow_count(self) -> int:
        """Number of overflow segments chained beyond the main segment."""
        return len(self.segments) - 1

    def has_overflow(self) -> bool:
        return len(self.segments) > 1

    def is_full(self) -> bool:
        return self.main_segment.is_full()

    def is_empty(self) -> bool:
        return self.main_segment.is_empty()

    def size(self) -> int:
        return len(self.main_segment)

    def __str__(self) -> str:
        text = (f"Bucket{{bucketNumber={self.bucket_number}, capacity={self.capacity}, "
                f"entries={self.size()}")
        if self.has_overflow():
            text += f", hasOverflow=true, overflowCount={self.get_overflow_count()}"
        return text + "}"
