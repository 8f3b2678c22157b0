from .exceptions import (
    HashIndexException,
    InvalidArgumentError,
    RecordSourceError,
    IndexStateError,
)
from .search_result import SearchResult

__all__ = [
    "HashIndexException",
    "InvalidArgumentError",
    "RecordSourceError",
    "IndexStateError",
    "SearchResult",
]
