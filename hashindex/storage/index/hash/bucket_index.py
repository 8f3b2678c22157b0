import logging
from typing import Iterator, List, Optional, Tuple

from .bucket import Bucket, BucketEntry
from .hash_function import HashFunction
from ...page import PageStore
from ....core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


class BucketIndex:
    """
    Static hash index over the records of a PageStore.

    The number of buckets is fixed when the index is built:

        NB = ceil(NR / FR) + 1

    where NR is the number of records and FR the bucket capacity. The
    extra bucket keeps a degenerate distribution from having nowhere to
    go. Buckets that fill up grow overflow chains instead of being split,
    and the index is never modified after build().

    Entries only point at pages; the index does not own them.
    """

    def __init__(self, buckets: List[Bucket], bucket_capacity: int,
                 hash_function: HashFunction, collisions: int = 0, overflows: int = 0):
        self._buckets = buckets
        self.bucket_capacity = bucket_capacity
        self.hash_function = hash_function
        self.collisions = collisions
        self.overflows = overflows

    @staticmethod
    def bucket_count_for(total_records: int, bucket_capacity: int) -> int:
        """ceil(total_records / bucket_capacity) + 1, in integer arithmetic."""
        return (total_records + bucket_capacity - 1) // bucket_capacity + 1

    @classmethod
    def build(cls, store: PageStore, bucket_capacity: int,
              hash_function: HashFunction) -> 'BucketIndex':
        """
        Build an index over every record in the store.

        Records are inserted in ascending page order, then in their order
        within the page. An insertion counts as a collision when the target
        bucket's main segment already holds an entry, whether the new entry
        lands in the main segment or in an overflow segment.

        Args:
            store: Pages to index
            bucket_capacity: Maximum entries per bucket segment
            hash_function: Strategy mapping keys to bucket numbers

        Returns:
            The new index, with its collision and overflow counts

        Raises:
            InvalidArgumentError: If bucket_capacity is not a positive integer
        """
        if not isinstance(bucket_capacity, int) or bucket_capacity <= 0:
            raise InvalidArgumentError(
                f"Bucket capacity must be a positive integer, got {bucket_capacity!r}")

        num_buckets = cls.bucket_count_for(store.total_records(), bucket_capacity)
        buckets = [Bucket(i, bucket_capacity) for i in range(num_buckets)]

        collisions = 0
        for record, page_number in store.iter_records():
            bucket = buckets[hash_function.hash(record, num_buckets)]
            if not bucket.is_empty():
                collisions += 1
            bucket.add_entry(BucketEntry(record, page_number))

        overflows = sum(bucket.get_overflow_count() for bucket in buckets)

        logger.debug("Built bucket index with %s: %d buckets, %d collisions, %d overflow segments",
                     hash_function.get_name(), num_buckets, collisions, overflows)
        return cls(buckets, bucket_capacity, hash_function, collisions, overflows)

    @classmethod
    def build_with_counts(cls, store: PageStore, bucket_capacity: int,
                          hash_function: HashFunction) -> Tuple['BucketIndex', int, int]:
        """Build an index and return it with its (collisions, overflows) counts."""
        index = cls.build(store, bucket_capacity, hash_function)
        return index, index.collisions, index.overflows

    def num_buckets(self) -> int:
        return len(self._buckets)

    def get_bucket(self, bucket_number: int) -> Bucket:
        return self._buckets[bucket_number]

    def get_buckets(self) -> List[Bucket]:
        return list(self._buckets)

    def bucket_for(self, key: str) -> Bucket:
        """Return the bucket the hash function assigns the key to."""
        return self._buckets[self.hash_function.hash(key, len(self._buckets))]

    def find_page(self, key: str) -> Optional[int]:
        """Return the page number recorded for the key, or None if absent."""
        return self.bucket_for(key).find_page(key)

    def total_entries(self) -> int:
        return sum(bucket.get_total_entries() for bucket in self._buckets)

    def get_statistics(self) -> dict:
        """Get statistics about the bucket index."""
        num_entries = self.total_entries()
        return {
            'num_entries': num_entries,
            'num_buckets': len(self._buckets),
            'bucket_capacity': self.bucket_capacity,
            'collisions': self.collisions,
            'num_overflows': self.overflows,
            'empty_buckets': sum(1 for bucket in self._buckets if bucket.is_empty()),
            'max_chain_length': max(len(bucket.segments) for bucket in self._buckets),
            'hash_function': self.hash_function.get_name(),
            'load_factor': num_entries / (len(self._buckets) * self.bucket_capacity)
        }

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self._buckets)

    def __str__(self) -> str:
        return (f"BucketIndex(buckets={len(self._buckets)}, capacity={self.bucket_capacity}, "
                f"hash={self.hash_function.get_name()})")
