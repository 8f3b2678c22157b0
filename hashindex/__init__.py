"""
Hash index simulator.

Compares the cost of a static hash secondary index against a full table
scan over a paged record store.
"""

from .core import (
    HashIndexException,
    InvalidArgumentError,
    RecordSourceError,
    IndexStateError,
    SearchResult,
)
from .engine import HashIndexEngine, EngineState, IndexStatistics
from .storage import (
    Page,
    PageStore,
    RecordSource,
    FileRecordSource,
    PackageResourceRecordSource,
    TextRecordSource,
)
from .storage.index.hash import (
    HashFunction,
    HashFunctionType,
    create_hash_function,
    Bucket,
    BucketEntry,
    BucketIndex,
)

__version__ = "0.1.0"

__all__ = [
    "HashIndexException",
    "InvalidArgumentError",
    "RecordSourceError",
    "IndexStateError",
    "SearchResult",
    "HashIndexEngine",
    "EngineState",
    "IndexStatistics",
    "Page",
    "PageStore",
    "RecordSource",
    "FileRecordSource",
    "PackageResourceRecordSource",
    "TextRecordSource",
    "HashFunction",
    "HashFunctionType",
    "create_hash_function",
    "Bucket",
    "BucketEntry",
    "BucketIndex",
]
