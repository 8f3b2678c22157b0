import threading
from dataclasses import dataclass, field, fields, replace


@dataclass
class IndexStatistics:
    """
    Counters and timers that make index search and table scan comparable.

    Construction counters are recomputed on every index build. The query
    fields hold the cost of the most recent search and the most recent
    table scan only; they are overwritten, not accumulated.
    """
    total_records: int = 0
    total_pages: int = 0
    total_buckets: int = 0
    bucket_capacity: int = 0
    collisions: int = 0
    overflows: int = 0

    # Most recent query of each kind
    search_accesses: int = 0
    table_scan_accesses: int = 0
    search_time_nanos: int = 0
    table_scan_time_nanos: int = 0

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False,
                                  repr=False, compare=False)

    def reset(self) -> None:
        """Zero every counter and timer."""
        with self._lock:
            for f in fields(self):
                if f.init:
                    setattr(self, f.name, 0)

    def record_load(self, total_records: int, total_pages: int) -> None:
        with self._lock:
            self.total_records = total_records
            self.total_pages = total_pages

    def record_construction(self, total_buckets: int, bucket_capacity: int,
                            collisions: int, overflows: int) -> None:
        with self._lock:
            self.total_buckets = total_buckets
            self.bucket_capacity = bucket_capacity
            self.collisions = collisions
            self.overflows = overflows

    def record_search(self, time_nanos: int, accesses: int) -> None:
        with self._lock:
            self.search_time_nanos = time_nanos
            self.search_accesses = accesses

    def record_table_scan(self, time_nanos: int, accesses: int) -> None:
        with self._lock:
            self.table_scan_time_nanos = time_nanos
            self.table_scan_accesses = accesses

    @property
    def collision_rate(self) -> float:
        """Collisions as a percentage of records."""
        if self.total_records == 0:
            return 0.0
        return self.collisions * 100.0 / self.total_records

    @property
    def overflow_rate(self) -> float:
        """Overflow segments as a percentage of buckets."""
        if self.total_buckets == 0:
            return 0.0
        return self.overflows * 100.0 / self.total_buckets

    @property
    def time_difference_millis(self) -> float:
        """How much longer the last table scan took than the last index search."""
        return (self.table_scan_time_nanos - self.search_time_nanos) / 1_000_000.0

    def snapshot(self) -> 'IndexStatistics':
        """Return an independent copy, taken atomically."""
        with self._lock:
            return replace(self)

    def to_dict(self) -> dict:
        with self._lock:
            data = {f.name: getattr(self, f.name) for f in fields(self) if f.init}
        data['collision_rate'] = self.collision_rate
        data['overflow_rate'] = self.overflow_rate
        data['time_difference_millis'] = self.time_difference_millis
        return data

    def __str__(self) -> str:
        return (
            "IndexStatistics {\n"
            f"    Total Records: {self.total_records:,}\n"
            f"    Total Pages: {self.total_pages:,}\n"
            f"    Total Buckets: {self.total_buckets:,}\n"
            f"    Bucket Capacity: {self.bucket_capacity}\n"
            f"    Collisions: {self.collisions:,} ({self.collision_rate:.2f}%)\n"
            f"    Overflows: {self.overflows:,} ({self.overflow_rate:.2f}%)\n"
            f"    Search Accesses: {self.search_accesses:,}\n"
            f"    Table Scan Accesses: {self.table_scan_accesses:,}\n"
            f"    Search Time: {self.search_time_nanos / 1_000_000.0:.2f} ms\n"
            f"    Table Scan Time: {self.table_scan_time_nanos / 1_000_000.0:.2f} ms\n"
            f"    Time Difference: {self.time_difference_millis:.2f} ms\n"
            "}"
        )
