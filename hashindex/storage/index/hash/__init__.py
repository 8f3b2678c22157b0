from .hash_function import (
    HashFunction,
    HashFunctionType,
    SimpleModuloHashFunction,
    DJB2HashFunction,
    FNV1aHashFunction,
    create_hash_function,
    create_default_hash_function,
    available_hash_functions,
)
from .bucket import Bucket, BucketEntry, BucketSegment
from .bucket_index import BucketIndex

__all__ = [
    "HashFunction",
    "HashFunctionType",
    "SimpleModuloHashFunction",
    "DJB2HashFunction",
    "FNV1aHashFunction",
    "create_hash_function",
    "create_default_hash_function",
    "available_hash_functions",
    "Bucket",
    "BucketEntry",
    "BucketSegment",
    "BucketIndex",
]
