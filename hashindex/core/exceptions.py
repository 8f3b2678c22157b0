"""Custom exceptions for the hash index simulator."""


class HashIndexException(Exception):
    """Base exception for hash index errors."""
    pass


class InvalidArgumentError(HashIndexException, ValueError):
    """Raised for a non-positive page size or bucket capacity, or an unknown hash function."""
    pass


class RecordSourceError(HashIndexException):
    """Raised when the record source cannot be opened or read."""
    pass


class IndexStateError(HashIndexException):
    """Raised when a query is issued before the required build step has completed."""
    pass
