import logging
import threading
import time
from enum import Enum
from typing import List, Optional, Tuple, Union

from .statistics import IndexStatistics
from .. import config
from ..core.exceptions import IndexStateError, InvalidArgumentError
from ..core.search_result import SearchResult
from ..storage.page import Page, PageStore
from ..storage.record_source import RecordSource, PackageResourceRecordSource
from ..storage.index.hash import (
    Bucket,
    BucketIndex,
    HashFunction,
    HashFunctionType,
    create_hash_function,
)

logger = logging.getLogger(__name__)


class EngineState(Enum):
    """Lifecycle of an engine: nothing loaded, pages only, pages plus index."""
    EMPTY = "empty"
    LOADED = "loaded"
    INDEXED = "indexed"


class HashIndexEngine:
    """
    Orchestrates paging, index construction and the two lookup algorithms.

    The engine owns one PageStore and, once constructed, one BucketIndex:

    ```
    HashIndexEngine
    ├── RecordSource (line-delimited records, read on load)
    ├── PageStore (fixed-capacity pages)
    ├── BucketIndex (static hash index over the pages)
    ├── HashFunction (active strategy for the next construct)
    └── IndexStatistics (construction counters, last query costs)
    ```

    Concurrency:
    - load() and construct() are exclusive writers. They build the new
      structure first and swap it in under the writer lock, so a failed
      rebuild leaves the previous state in place.
    - search_with_index() and table_scan() take a consistent snapshot of
      the structures under the same lock and then read without it; the
      structures they read are immutable, so queries may run concurrently
      with each other.

    Engines are plain objects owned by their caller; any number of
    independent engines can coexist.
    """

    def __init__(self, record_source: Optional[RecordSource] = None,
                 hash_function: Union[str, HashFunctionType, HashFunction, None] = None):
        """
        Create an engine in the EMPTY state.

        Args:
            record_source: Where load() reads records from. Defaults to the
                word list bundled with the package.
            hash_function: Initial strategy (name, type or instance).
                Defaults to config.DEFAULT_HASH_FUNCTION.
        """
        self._record_source = record_source or PackageResourceRecordSource()
        self._hash_function = self._resolve_hash_function(
            hash_function if hash_function is not None else config.DEFAULT_HASH_FUNCTION)

        self._page_store: Optional[PageStore] = None
        self._bucket_index: Optional[BucketIndex] = None
        self._statistics = IndexStatistics()

        self._page_size = config.DEFAULT_PAGE_SIZE
        self._bucket_capacity = config.DEFAULT_BUCKET_CAPACITY

        # Serializes rebuilds and snapshotting of the structures
        self._write_lock = threading.RLock()

    @staticmethod
    def _resolve_hash_function(fn: Union[str, HashFunctionType, HashFunction]) -> HashFunction:
        if isinstance(fn, HashFunction):
            return fn
        return create_hash_function(fn)

    @property
    def state(self) -> EngineState:
        with self._write_lock:
            if self._page_store is None:
                return EngineState.EMPTY
            if self._bucket_index is None:
                return EngineState.LOADED
            return EngineState.INDEXED

    def load(self, page_size: Optional[int] = None) -> None:
        """
        Read the record source and partition it into pages.

        Any existing index is discarded and statistics are reset.

        Args:
            page_size: Records per page; defaults to config.DEFAULT_PAGE_SIZE

        Raises:
            InvalidArgumentError: If page_size is not a positive integer
            RecordSourceError: If the record source cannot be read
        """
        if page_size is None:
            page_size = config.DEFAULT_PAGE_SIZE
        if not isinstance(page_size, int) or page_size <= 0:
            raise InvalidArgumentError(f"Page size must be a positive integer, got {page_size!r}")

        with self._write_lock:
            records = self._record_source.read_records()
            page_store = PageStore.build(records, page_size)

            self._page_store = page_store
            self._bucket_index = None
            self._page_size = page_size

            self._statistics.reset()
            self._statistics.record_load(len(records), page_store.num_pages())

        logger.info("Loaded %d records from %s into %d pages (page size %d)",
                    len(records), self._record_source.describe(),
                    page_store.num_pages(), page_size)

    def set_hash_function(self, hash_function: Union[str, HashFunctionType, HashFunction]) -> None:
        """
        Replace the active hash strategy.

        An already built index keeps the strategy it was built with until
        the next construct().

        Raises:
            InvalidArgumentError: If the strategy name is unknown
        """
        resolved = self._resolve_hash_function(hash_function)
        with self._write_lock:
            self._hash_function = resolved
        logger.debug("Hash function set to %s", resolved.get_name())

    def construct(self, bucket_capacity: Optional[int] = None) -> None:
        """
        Build the hash index over the loaded pages, replacing any previous index.

        Args:
            bucket_capacity: Entries per bucket segment; defaults to
                config.DEFAULT_BUCKET_CAPACITY

        Raises:
            InvalidArgumentError: If bucket_capacity is not a positive integer
            IndexStateError: If no data has been loaded
        """
        if bucket_capacity is None:
            bucket_capacity = config.DEFAULT_BUCKET_CAPACITY
        if not isinstance(bucket_capacity, int) or bucket_capacity <= 0:
            raise InvalidArgumentError(
                f"Bucket capacity must be a positive integer, got {bucket_capacity!r}")

        with self._write_lock:
            if self._page_store is None:
                raise IndexStateError("Cannot construct an index before data is loaded")

            index = BucketIndex.build(self._page_store, bucket_capacity, self._hash_function)

            self._bucket_index = index
            self._bucket_capacity = bucket_capacity
            self._statistics.record_construction(
                index.num_buckets(), bucket_capacity, index.collisions, index.overflows)

        logger.info("Constructed index with %s: %d buckets of capacity %d, "
                    "%d collisions, %d overflow segments",
                    index.hash_function.get_name(), index.num_buckets(), bucket_capacity,
                    index.collisions, index.overflows)

    def _snapshot(self) -> Tuple[Optional[PageStore], Optional[BucketIndex]]:
        with self._write_lock:
            return self._page_store, self._bucket_index

    def search_with_index(self, search_key: str) -> SearchResult:
        """
        Look a key up through the hash index.

        Cost model: one access for the bucket (regardless of how long its
        overflow chain is) plus one access for the page the bucket entry
        points to. The page is then checked for the key, and that check
        decides whether the key counts as found.

        Raises:
            IndexStateError: If no index has been constructed
        """
        page_store, index = self._snapshot()
        if index is None or page_store is None:
            raise IndexStateError("Cannot search with an index before it is constructed")

        start = time.perf_counter_ns()

        bucket = index.bucket_for(search_key)
        accesses = 1
        page_number = bucket.find_page(search_key)

        if page_number is not None:
            accesses += 1
            found = page_store.get_page(page_number).contains_record(search_key)
            result = SearchResult(found, page_number, accesses, search_key)
        else:
            result = SearchResult(False, -1, accesses, search_key)

        self._statistics.record_search(time.perf_counter_ns() - start, accesses)
        logger.debug("Index search: %s", result)
        return result

    def table_scan(self, search_key: str) -> SearchResult:
        """
        Look a key up by reading pages in order until one contains it.

        Each page read counts as one access; a miss costs one access per page.

        Raises:
            IndexStateError: If no data has been loaded
        """
        page_store, _ = self._snapshot()
        if page_store is None:
            raise IndexStateError("Cannot scan the table before data is loaded")

        start = time.perf_counter_ns()

        accesses = 0
        result = None
        for page in page_store:
            accesses += 1
            if page.contains_record(search_key):
                result = SearchResult(True, page.page_number, accesses, search_key)
                break

        if result is None:
            result = SearchResult(False, -1, accesses, search_key)

        self._statistics.record_table_scan(time.perf_counter_ns() - start, accesses)
        logger.debug("Table scan: %s", result)
        return result

    def get_statistics(self) -> IndexStatistics:
        """Return a snapshot of the statistics."""
        return self._statistics.snapshot()

    def get_pages(self) -> List[Page]:
        page_store, _ = self._snapshot()
        return page_store.get_pages() if page_store is not None else []

    def get_buckets(self) -> List[Bucket]:
        _, index = self._snapshot()
        return index.get_buckets() if index is not None else []

    def get_first_page(self) -> Optional[Page]:
        page_store, _ = self._snapshot()
        return page_store.first() if page_store is not None else None

    def get_last_page(self) -> Optional[Page]:
        page_store, _ = self._snapshot()
        return page_store.last() if page_store is not None else None

    def get_page_store(self) -> Optional[PageStore]:
        return self._snapshot()[0]

    def get_bucket_index(self) -> Optional[BucketIndex]:
        return self._snapshot()[1]

    def get_hash_function(self) -> HashFunction:
        with self._write_lock:
            return self._hash_function

    def get_page_size(self) -> int:
        return self._page_size

    def get_bucket_capacity(self) -> int:
        return self._bucket_capacity

    def get_record_source(self) -> RecordSource:
        return self._record_source
