"""
STATIC HASH SECONDARY INDEX

The index maps each record key to the page that stores it, so that a point
lookup costs one bucket access plus one page access instead of a scan over
every page.

STRUCTURE:
┌─────────────────────────────────────────────────────────┐
│                    PAGE STORE                           │
│  ┌─────────┐ ┌─────────┐ ┌─────────┐ ┌─────────┐        │
│  │ Page 0  │ │ Page 1  │ │ Page 2  │ │ Page 3  │ ...    │
│  │ [a, b]  │ │ [c, d]  │ │ [e]     │ │         │        │
│  └─────────┘ └─────────┘ └─────────┘ └─────────┘        │
└─────────────────────────────────────────────────────────┘
        ▲            ▲           ▲
        │ page no.   │           │
┌─────────────────────────────────────────────────────────┐
│                   BUCKET INDEX                          │
│  Bucket 0: [d -> 1]                                     │
│  Bucket 1: [a -> 0, e -> 2]  ──► overflow segment ...   │
│  Bucket 2: [b -> 0]                                     │
│  Bucket 3: [c -> 1]                                     │
└─────────────────────────────────────────────────────────┘

Key Design Principles:
1. **Static**: the bucket count ceil(NR / FR) + 1 is fixed at build time
2. **Chained overflow**: full buckets grow a list of overflow segments
3. **Pluggable hashing**: a closed set of named hash strategies
4. **Read-only after build**: rebuilding means building a new index
"""

from .hash import (
    HashFunction,
    HashFunctionType,
    create_hash_function,
    Bucket,
    BucketEntry,
    BucketIndex,
)

__all__ = [
    "HashFunction",
    "HashFunctionType",
    "create_hash_function",
    "Bucket",
    "BucketEntry",
    "BucketIndex",
]
