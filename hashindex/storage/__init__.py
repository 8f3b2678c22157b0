from .page import Page, PageStore
from .record_source import (
    RecordSource,
    FileRecordSource,
    PackageResourceRecordSource,
    TextRecordSource,
    parse_records,
)

__all__ = [
    "Page",
    "PageStore",
    "RecordSource",
    "FileRecordSource",
    "PackageResourceRecordSource",
    "TextRecordSource",
    "parse_records",
]
