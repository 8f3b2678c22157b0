"""
Main application module.

Loads the bundled word list, builds the hash index and compares an index
search against a table scan for each word given on the command line.

Usage:
    python -m hashindex.main [word ...]
"""

import logging
import sys
from typing import List, Optional

from . import config
from .core.exceptions import HashIndexException
from .engine import HashIndexEngine

DEFAULT_WORDS = ["hello", "world", "computer", "algorithm", "data"]


def compare(engine: HashIndexEngine, word: str) -> str:
    """Run both lookups for a word and describe their costs."""
    index_result = engine.search_with_index(word)
    scan_result = engine.table_scan(word)
    stats = engine.get_statistics()
    return (f"=== {word} ===\n"
            f"Index search: {index_result}\n"
            f"Table scan: {scan_result}\n"
            f"Time difference: {stats.time_difference_millis:.2f} ms")


def run(words: List[str], engine: Optional[HashIndexEngine] = None) -> HashIndexEngine:
    """Load, construct and compare the given words, printing a report."""
    engine = engine or HashIndexEngine()

    engine.load(config.DEFAULT_PAGE_SIZE)
    stats = engine.get_statistics()
    print(f"Total records: {stats.total_records:,}")
    print(f"Total pages: {stats.total_pages:,}")

    engine.construct(config.DEFAULT_BUCKET_CAPACITY)
    print(f"Total buckets: {len(engine.get_buckets()):,}")
    print(f"Hash function: {engine.get_hash_function().get_name()}")
    print()

    for word in words:
        print(compare(engine, word))
        print()

    print(engine.get_statistics())
    return engine


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point of the application."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    words = argv if argv is not None else sys.argv[1:]
    try:
        run(words or DEFAULT_WORDS)
    except HashIndexException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
