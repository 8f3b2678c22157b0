"""
Centralized configuration for the hash index simulator.

Each default can be overridden through the matching HASHINDEX_* environment
variable, read once at import time.
"""

import os

# Paging and bucketing
DEFAULT_PAGE_SIZE = int(os.environ.get("HASHINDEX_PAGE_SIZE", "100"))
DEFAULT_BUCKET_CAPACITY = int(os.environ.get("HASHINDEX_BUCKET_CAPACITY", "5"))

# Hash strategy used by a fresh engine
DEFAULT_HASH_FUNCTION = os.environ.get("HASHINDEX_HASH_FUNCTION", "djb2")

# Bundled record source
WORDS_RESOURCE_PACKAGE = "hashindex.resources"
WORDS_RESOURCE_NAME = "words.txt"
RECORD_ENCODING = "utf-8"

# Logging (applied by entry points only, never by the library)
LOG_LEVEL = os.environ.get("HASHINDEX_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
