import pytest

from hashindex.core.exceptions import InvalidArgumentError
from hashindex.storage.index.hash import (
    HashFunction,
    HashFunctionType,
    SimpleModuloHashFunction,
    DJB2HashFunction,
    FNV1aHashFunction,
    create_hash_function,
    create_default_hash_function,
    available_hash_functions,
)

ALL_FUNCTIONS = [SimpleModuloHashFunction(), DJB2HashFunction(), FNV1aHashFunction()]
SAMPLE_KEYS = ["a", "hello", "algorithm", "polygenelubricants", "ünïcödé", "x" * 500, ""]


class TestHashFunctionContract:
    """Tests shared by every hash strategy."""

    @pytest.mark.parametrize("fn", ALL_FUNCTIONS, ids=lambda f: f.type.value)
    def test_result_in_range(self, fn):
        """Test that every hash lands in [0, bucket_count)."""
        for key in SAMPLE_KEYS:
            for bucket_count in (1, 2, 3, 7, 100, 4099):
                value = fn.hash(key, bucket_count)
                assert 0 <= value < bucket_count

    @pytest.mark.parametrize("fn", ALL_FUNCTIONS, ids=lambda f: f.type.value)
    def test_deterministic_across_instances(self, fn):
        """Test that a fresh instance gives the same bucket for the same input."""
        other = type(fn)()
        for key in SAMPLE_KEYS:
            assert fn.hash(key, 97) == fn.hash(key, 97)
            assert fn.hash(key, 97) == other.hash(key, 97)

    @pytest.mark.parametrize("fn", ALL_FUNCTIONS, ids=lambda f: f.type.value)
    def test_non_positive_bucket_count_returns_zero(self, fn):
        """Test that zero or negative bucket counts return 0 instead of raising."""
        assert fn.hash("hello", 0) == 0
        assert fn.hash("hello", -5) == 0

    @pytest.mark.parametrize("fn", ALL_FUNCTIONS, ids=lambda f: f.type.value)
    def test_none_key_returns_zero(self, fn):
        """Test that a missing key hashes to bucket 0."""
        assert fn.hash(None, 10) == 0

    @pytest.mark.parametrize("fn", ALL_FUNCTIONS, ids=lambda f: f.type.value)
    def test_long_keys_stay_within_accumulator_width(self, fn):
        """Test that wraparound keeps the raw accumulator in its signed range."""
        bits = 32 if isinstance(fn, SimpleModuloHashFunction) else 64
        raw = fn.raw_hash("overflow" * 1000)
        assert -(1 << (bits - 1)) <= raw < (1 << (bits - 1))


class TestSimpleModuloHashFunction:
    """Tests for the 31-multiplier polynomial hash."""

    def setup_method(self):
        self.fn = SimpleModuloHashFunction()

    def test_single_characters(self):
        """Test the bucket assignments of the a..e scenario with four buckets."""
        assert [self.fn.hash(k, 4) for k in "abcde"] == [1, 2, 3, 0, 1]

    def test_matches_known_string_hash(self):
        """Test the accumulator against a well-known value."""
        assert self.fn.raw_hash("hello") == 99162322
        assert self.fn.hash("hello", 1000) == 322

    def test_32_bit_wraparound(self):
        """Test that overflow wraps to a negative accumulator and abs() is applied."""
        assert self.fn.raw_hash("polygenelubricants") == -2147483648
        assert self.fn.hash("polygenelubricants", 10) == 8

    def test_known_collision(self):
        """Test that 'Aa' and 'BB' share an accumulator."""
        assert self.fn.raw_hash("Aa") == self.fn.raw_hash("BB") == 2112

    def test_empty_key(self):
        assert self.fn.raw_hash("") == 0
        assert self.fn.hash("", 5) == 0


class TestDJB2HashFunction:
    """Tests for djb2."""

    def setup_method(self):
        self.fn = DJB2HashFunction()

    def test_seed(self):
        """Test that the empty key hashes to the seed."""
        assert self.fn.raw_hash("") == 5381

    def test_single_character(self):
        assert self.fn.raw_hash("a") == 5381 * 33 + 97
        assert self.fn.hash("a", 1000) == 670

    def test_order_sensitive(self):
        assert self.fn.raw_hash("ab") != self.fn.raw_hash("ba")


class TestFNV1aHashFunction:
    """Tests for FNV-1a."""

    def setup_method(self):
        self.fn = FNV1aHashFunction()

    def test_offset_basis(self):
        """Test that the empty key hashes to the offset basis."""
        assert self.fn.raw_hash("") == 2166136261

    def test_single_character(self):
        assert self.fn.raw_hash("a") == (2166136261 ^ 97) * 16777619
        assert self.fn.hash("a", 1000) == 132

    def test_hashes_utf8_bytes(self):
        """Test that multi-byte characters contribute each of their bytes."""
        expected = 2166136261
        for b in "é".encode("utf-8"):
            expected = ((expected ^ b) * 16777619) & 0xFFFFFFFFFFFFFFFF
        assert self.fn.raw_hash("é") == expected


class TestHashFunctionFactory:
    """Tests for selecting strategies by name."""

    @pytest.mark.parametrize("name, expected", [
        ("simple_modulo", SimpleModuloHashFunction),
        ("Simple Modulo", SimpleModuloHashFunction),
        ("SIMPLE_MODULO", SimpleModuloHashFunction),
        ("djb2", DJB2HashFunction),
        ("DJB2 Hash", DJB2HashFunction),
        ("fnv1a", FNV1aHashFunction),
        ("FNV-1a", FNV1aHashFunction),
        ("fnv_1a", FNV1aHashFunction),
    ])
    def test_create_by_name(self, name, expected):
        assert isinstance(create_hash_function(name), expected)

    def test_create_by_type(self):
        for hash_type in HashFunctionType:
            fn = create_hash_function(hash_type)
            assert isinstance(fn, HashFunction)
            assert fn.type is hash_type

    @pytest.mark.parametrize("name", ["md5", "", "djb3", 42, None])
    def test_unknown_name_fails_closed(self, name):
        with pytest.raises(InvalidArgumentError):
            create_hash_function(name)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            create_hash_function("sha256")

    def test_default_is_djb2(self):
        assert isinstance(create_default_hash_function(), DJB2HashFunction)

    def test_available_hash_functions(self):
        assert available_hash_functions() == [
            HashFunctionType.SIMPLE_MODULO, HashFunctionType.DJB2, HashFunctionType.FNV1A]

    def test_display_names(self):
        assert SimpleModuloHashFunction().get_name() == "Simple Modulo Hash"
        assert DJB2HashFunction().get_name() == "DJB2 Hash"
        assert FNV1aHashFunction().get_name() == "FNV-1a Hash"

    def test_equality_by_type(self):
        assert create_hash_function("djb2") == DJB2HashFunction()
        assert create_hash_function("djb2") != FNV1aHashFunction()
