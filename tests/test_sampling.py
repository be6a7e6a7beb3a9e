"""
Unit tests for the random sampling primitives.
"""

from collections import Counter

import pytest

from passforge.exceptions import InsufficientRangeError, InvalidRangeError
from passforge.utils.random_source import (
    DefaultRandomSource,
    ReplayRandomSource,
    SecureRandomSource,
    get_default_source,
)
from passforge.utils.sampling import random_in_range, unique_randoms_in_range


class TestRandomInRange:
    """Test the uniform single-integer sampler."""

    def test_within_bounds(self):
        for _ in range(500):
            value = random_in_range(3, 9)
            assert 3 <= value <= 9

    def test_single_value_range(self):
        assert random_in_range(5, 5) == 5

    def test_negative_bounds(self):
        for _ in range(100):
            assert -4 <= random_in_range(-4, -1) <= -1

    def test_inverted_range_raises(self):
        with pytest.raises(InvalidRangeError, match="min 10 > max 2"):
            random_in_range(10, 2)

    def test_every_value_reachable(self):
        source = DefaultRandomSource(seed=3)
        seen = {random_in_range(0, 5, source) for _ in range(500)}
        assert seen == set(range(6))

    def test_uses_given_source(self):
        source = ReplayRandomSource([2])
        assert random_in_range(10, 20, source) == 12

    def test_secure_source(self):
        source = SecureRandomSource()
        for _ in range(100):
            assert 0 <= random_in_range(0, 3, source) <= 3


class TestUniqueRandomsInRange:
    """Test the unique integer set sampler."""

    def test_distinct_and_in_range(self):
        for quantity in range(0, 11):
            values = unique_randoms_in_range(quantity, 5, 14)
            assert len(values) == quantity
            assert len(set(values)) == quantity
            assert all(5 <= v <= 14 for v in values)

    def test_zero_quantity(self):
        assert unique_randoms_in_range(0, 1, 10) == []
        # An empty range is fine when nothing is requested
        assert unique_randoms_in_range(0, 1, 0) == []

    def test_full_range_is_permutation(self):
        for length in (1, 2, 8, 32):
            sequence = unique_randoms_in_range(length, 0, length - 1)
            assert sorted(sequence) == list(range(length))

    def test_quantity_exceeds_range(self):
        with pytest.raises(InsufficientRangeError):
            unique_randoms_in_range(4, 1, 3)

    def test_inverted_range(self):
        with pytest.raises(InsufficientRangeError):
            unique_randoms_in_range(1, 5, 4)

    def test_negative_quantity(self):
        with pytest.raises(InvalidRangeError):
            unique_randoms_in_range(-1, 0, 10)

    def test_insufficient_range_is_invalid_range(self):
        assert issubclass(InsufficientRangeError, InvalidRangeError)

    def test_replay_draw_order(self):
        """Draws remove candidates from the pool, so zeros walk it in order."""
        assert unique_randoms_in_range(3, 10, 14, ReplayRandomSource([0])) == [10, 11, 12]
        assert unique_randoms_in_range(3, 10, 14, ReplayRandomSource([4, 3, 2])) == [14, 13, 12]

    def test_subsets_uniform(self):
        """Each 2-subset of a 4-value range is drawn about equally often."""
        source = DefaultRandomSource(seed=11)
        counts = Counter(
            frozenset(unique_randoms_in_range(2, 0, 3, source)) for _ in range(6000)
        )

        assert len(counts) == 6
        for count in counts.values():
            assert 800 < count < 1200

    def test_permutation_positions_uniform(self):
        """The first element of a full permutation is uniform over the range."""
        source = DefaultRandomSource(seed=5)
        counts = Counter(unique_randoms_in_range(4, 0, 3, source)[0] for _ in range(4000))

        assert set(counts) == {0, 1, 2, 3}
        for count in counts.values():
            assert 850 < count < 1150


class TestRandomSources:
    """Test the random source implementations."""

    def test_seeded_sources_agree(self):
        a = DefaultRandomSource(seed=99)
        b = DefaultRandomSource(seed=99)
        assert [a.randint(0, 1000) for _ in range(20)] == [b.randint(0, 1000) for _ in range(20)]

    def test_replay_wraps_around(self):
        source = ReplayRandomSource([1, 2])
        assert [source.randint(0, 9) for _ in range(4)] == [1, 2, 1, 2]

    def test_replay_reduces_into_range(self):
        source = ReplayRandomSource([7])
        assert source.randint(0, 2) == 1

    def test_replay_empty_sequence(self):
        with pytest.raises(ValueError):
            ReplayRandomSource([])

    def test_default_source_shared(self):
        assert get_default_source() is get_default_source()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
