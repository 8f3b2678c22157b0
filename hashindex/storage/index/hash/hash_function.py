"""
Hash functions mapping string search keys to bucket numbers.

The set of strategies is closed: HashFunctionType names every variant and
create_hash_function() is the only way to select one by name. All
strategies are stateless and deterministic across runs, so they never use
Python's salted built-in hash().
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Union

from .... import config
from ....core.exceptions import InvalidArgumentError

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF


def _to_signed(value: int, bits: int) -> int:
    """Reinterpret an unsigned value as a two's-complement integer of the given width."""
    if value >= 1 << (bits - 1):
        return value - (1 << bits)
    return value


class HashFunctionType(Enum):
    """
    Enum for the available hash strategies.
    """
    SIMPLE_MODULO = "simple_modulo"
    DJB2 = "djb2"
    FNV1A = "fnv1a"

    def get_display_name(self) -> str:
        display_names = {
            HashFunctionType.SIMPLE_MODULO: "Simple Modulo Hash",
            HashFunctionType.DJB2: "DJB2 Hash",
            HashFunctionType.FNV1A: "FNV-1a Hash",
        }

        return display_names[self]


class HashFunction(ABC):
    """
    Maps a search key to a bucket address.

    hash() returns a value in [0, bucket_count) for any key and any positive
    bucket count, and 0 when the key is None or bucket_count <= 0.
    """

    type: HashFunctionType

    def hash(self, key: Optional[str], bucket_count: int) -> int:
        if key is None or bucket_count <= 0:
            return 0
        return abs(self.raw_hash(key)) % bucket_count

    @abstractmethod
    def raw_hash(self, key: str) -> int:
        """Return the signed accumulator value for the key before reduction."""
        pass

    def get_name(self) -> str:
        return self.type.get_display_name()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HashFunction) and self.type == other.type

    def __hash__(self) -> int:
        return hash(self.type)

    def __str__(self) -> str:
        return self.get_name()

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SimpleModuloHashFunction(HashFunction):
    """
    Polynomial hash with multiplier 31 over a 32-bit signed accumulator.

    This reproduces Java's String.hashCode() for text in the Basic
    Multilingual Plane, including its overflow behaviour.
    """

    type = HashFunctionType.SIMPLE_MODULO

    def raw_hash(self, key: str) -> int:
        h = 0
        for c in key:
            h = (h * 31 + ord(c)) & MASK_32
        return _to_signed(h, 32)


class DJB2HashFunction(HashFunction):
    """Bernstein's djb2: h = h * 33 + c, seeded with 5381, 64-bit wraparound."""

    type = HashFunctionType.DJB2

    SEED = 5381

    def raw_hash(self, key: str) -> int:
        h = self.SEED
        for c in key:
            h = (((h << 5) + h) + ord(c)) & MASK_64
        return _to_signed(h, 64)


class FNV1aHashFunction(HashFunction):
    """FNV-1a over the UTF-8 bytes of the key, 64-bit wraparound."""

    type = HashFunctionType.FNV1A

    OFFSET_BASIS = 2166136261
    PRIME = 16777619

    def raw_hash(self, key: str) -> int:
        h = self.OFFSET_BASIS
        for b in key.encode("utf-8"):
            h = ((h ^ b) * self.PRIME) & MASK_64
        return _to_signed(h, 64)


_IMPLEMENTATIONS = {
    HashFunctionType.SIMPLE_MODULO: SimpleModuloHashFunction,
    HashFunctionType.DJB2: DJB2HashFunction,
    HashFunctionType.FNV1A: FNV1aHashFunction,
}


def _normalize(name: str) -> str:
    return "".join(ch for ch in name.lower() if ch not in " -_")


def _lookup_type(name: str) -> HashFunctionType:
    wanted = _normalize(name)
    for hash_type in HashFunctionType:
        aliases = {
            _normalize(hash_type.value),
            _normalize(hash_type.name),
            _normalize(hash_type.get_display_name()),
            _normalize(hash_type.get_display_name().replace(" Hash", "")),
        }
        if wanted in aliases:
            return hash_type
    raise InvalidArgumentError(f"Unknown hash function: {name!r}")


def create_hash_function(name_or_type: Union[str, HashFunctionType]) -> HashFunction:
    """
    Create a hash function by strategy name or type.

    Names are matched case-insensitively against the enum value, the enum
    name and the display name, ignoring spaces, dashes and underscores, so
    "djb2", "FNV-1a" and "Simple Modulo" are all accepted.

    Raises:
        InvalidArgumentError: If the name does not match any strategy
    """
    if isinstance(name_or_type, HashFunctionType):
        hash_type = name_or_type
    elif isinstance(name_or_type, str):
        hash_type = _lookup_type(name_or_type)
    else:
        raise InvalidArgumentError(f"Unknown hash function: {name_or_type!r}")

    return _IMPLEMENTATIONS[hash_type]()


def create_default_hash_function() -> HashFunction:
    return create_hash_function(config.DEFAULT_HASH_FUNCTION)


def available_hash_functions() -> List[HashFunctionType]:
    return list(HashFunctionType)
