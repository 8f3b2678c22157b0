import pytest

from hashindex.core.exceptions import InvalidArgumentError
from hashindex.storage.index.hash import Bucket, BucketEntry, BucketSegment


class TestBucketEntry:

    def test_fields_and_str(self):
        entry = BucketEntry("apple", 4)
        assert entry.key == "apple"
        assert entry.page_number == 4
        assert str(entry) == "(apple -> Page 4)"

    def test_immutable(self):
        entry = BucketEntry("apple", 4)
        with pytest.raises(AttributeError):
            entry.page_number = 5


class TestBucketSegment:

    def test_insert_until_full(self):
        segment = BucketSegment(2)
        assert segment.is_empty()
        assert segment.insert_entry(BucketEntry("a", 0))
        assert segment.insert_entry(BucketEntry("b", 0))
        assert segment.is_full()
        assert not segment.insert_entry(BucketEntry("c", 1))
        assert len(segment) == 2

    def test_find_entry(self):
        segment = BucketSegment(3)
        segment.insert_entry(BucketEntry("a", 0))
        assert segment.find_entry("a") == BucketEntry("a", 0)
        assert segment.find_entry("b") is None


class TestBucket:
    """Tests for a bucket and its overflow chain."""

    def setup_method(self):
        self.bucket = Bucket(7, 2)

    def test_new_bucket(self):
        assert self.bucket.bucket_number == 7
        assert self.bucket.capacity == 2
        assert self.bucket.is_empty()
        assert not self.bucket.has_overflow()
        assert self.bucket.get_overflow_count() == 0
        assert len(self.bucket.segments) == 1

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(InvalidArgumentError):
            Bucket(0, 0)

    def test_fills_main_segment_first(self):
        self.bucket.add_entry(BucketEntry("a", 0))
        self.bucket.add_entry(BucketEntry("b", 1))

        assert self.bucket.is_full()
        assert not self.bucket.has_overflow()
        assert self.bucket.get_entries() == [BucketEntry("a", 0), BucketEntry("b", 1)]

    def test_overflow_chain_grows_one_segment_per_capacity(self):
        for i in range(7):
            self.bucket.add_entry(BucketEntry(f"k{i}", i))

        # 2 in main, then segments of 2, 2 and 1
        assert self.bucket.get_overflow_count() == 3
        assert self.bucket.has_overflow()
        assert [len(s) for s in self.bucket.segments] == [2, 2, 2, 1]
        assert all(s.capacity == 2 for s in self.bucket.segments)
        assert self.bucket.size() == 2
        assert self.bucket.get_total_entries() == 7

    def test_overflow_segments_exclude_main(self):
        for i in range(3):
            self.bucket.add_entry(BucketEntry(f"k{i}", i))
        overflow = self.bucket.get_overflow_segments()
        assert len(overflow) == 1
        assert overflow[0].entries == [BucketEntry("k2", 2)]

    def test_iter_entries_in_insertion_order(self):
        for i in range(5):
            self.bucket.add_entry(BucketEntry(f"k{i}", i))
        assert [e.key for e in self.bucket.iter_entries()] == ["k0", "k1", "k2", "k3", "k4"]

    def test_find_page_searches_overflow_chain(self):
        for i in range(5):
            self.bucket.add_entry(BucketEntry(f"k{i}", i * 10))

        assert self.bucket.find_page("k0") == 0
        assert self.bucket.find_page("k4") == 40
        assert self.bucket.find_page("missing") is None
        assert self.bucket.get_page_number("k3") == 30
        assert self.bucket.get_page_number("missing") == -1

    def test_duplicate_key_resolves_to_first_inserted(self):
        self.bucket.add_entry(BucketEntry("dup", 0))
        self.bucket.add_entry(BucketEntry("x", 1))
        self.bucket.add_entry(BucketEntry("dup", 2))

        assert self.bucket.find_page("dup") == 0

    def test_get_entries_returns_copy(self):
        self.bucket.add_entry(BucketEntry("a", 0))
        entries = self.bucket.get_entries()
        entries.clear()
        assert self.bucket.size() == 1

    def test_str(self):
        assert str(self.bucket) == "Bucket{bucketNumber=7, capacity=2, entries=0}"
        for i in range(3):
            self.bucket.add_entry(BucketEntry(f"k{i}", i))
        assert str(self.bucket) == ("Bucket{bucketNumber=7, capacity=2, entries=2, "
                                    "hasOverflow=true, overflowCount=1}")
