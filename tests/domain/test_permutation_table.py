"""Tests for PermutationTable value object."""

import pytest

from perlinicon.domain import TABLE_SIZE, PermutationTable
from perlinicon.infrastructure.randomness import SeededRandomSource

from ..conftest import FixedRandomSource


class TestPermutationTableBuilder:
    """Tests for building shuffled tables."""

    def test_length_is_512(self, shuffled_table):
        """Test table has 512 entries."""
        assert len(shuffled_table) == 512

    def test_first_half_is_permutation(self, shuffled_table):
        """Test each value 0..255 appears exactly once in the first half."""
        assert sorted(shuffled_table.values[:TABLE_SIZE]) == list(range(256))

    def test_second_half_duplicates_first(self, shuffled_table):
        """Test indices 256..511 mirror indices 0..255."""
        for i in range(TABLE_SIZE):
            assert shuffled_table[i + TABLE_SIZE] == shuffled_table[i]

    def test_shuffle_actually_shuffles(self, shuffled_table):
        """Test a seeded shuffle is not the identity."""
        assert shuffled_table != PermutationTable.identity()

    def test_same_seed_same_table(self):
        """Test shuffling is deterministic given the random source."""
        a = PermutationTable.shuffled(SeededRandomSource(7))
        b = PermutationTable.shuffled(SeededRandomSource(7))
        assert a == b

    def test_different_seeds_differ(self):
        """Test different seeds give different tables."""
        a = PermutationTable.shuffled(SeededRandomSource(1))
        b = PermutationTable.shuffled(SeededRandomSource(2))
        assert a != b

    def test_consumes_255_draws(self, fixed_random):
        """Test Fisher-Yates draws once per index from 255 down to 1."""
        PermutationTable.shuffled(fixed_random)
        assert fixed_random.draws == 255

    def test_zero_draws_still_valid(self):
        """Test a source stuck at 0 still yields a valid permutation."""
        table = PermutationTable.shuffled(FixedRandomSource(0.0))
        assert sorted(table.values[:TABLE_SIZE]) == list(range(256))

    def test_near_one_draws_still_valid(self):
        """Test draws just under 1 never index past the current position."""
        table = PermutationTable.shuffled(FixedRandomSource(0.999999))
        assert sorted(table.values[:TABLE_SIZE]) == list(range(256))
        # Every swap is with itself
        assert table == PermutationTable.identity()


class TestPermutationTableValidation:
    """Tests for table invariants."""

    def test_wrong_length_raises(self):
        """Test that a short table raises ValueError."""
        with pytest.raises(ValueError, match="512 entries"):
            PermutationTable(tuple(range(256)))

    def test_non_permutation_raises(self):
        """Test that repeated values raise ValueError."""
        values = [0] * 256
        with pytest.raises(ValueError, match="permutation"):
            PermutationTable(tuple(values * 2))

    def test_mismatched_halves_raise(self):
        """Test that halves must match."""
        first = list(range(256))
        second = list(reversed(first))
        with pytest.raises(ValueError, match="duplicate"):
            PermutationTable(tuple(first + second))

    def test_is_immutable(self, identity_table):
        """Test the table cannot be reassigned."""
        with pytest.raises(AttributeError):
            identity_table.values = ()
