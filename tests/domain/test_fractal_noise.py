"""Tests for fractal (octave) noise."""

import pytest

from perlinicon.domain import PermutationTable, octave_noise, perlin_noise
from perlinicon.infrastructure.randomness import SeededRandomSource


class TestOctaveNoise:
    """Tests for octave_noise composition."""

    def test_single_octave_matches_perlin(self, shuffled_table):
        """Test one octave is plain gradient noise."""
        for x, y in [(0.3, 0.7), (12.5, 3.25), (100.1, 99.9)]:
            assert octave_noise(x, y, 1, 0.5, shuffled_table) == perlin_noise(
                x, y, shuffled_table
            )

    def test_normalized_by_weights(self, identity_table):
        """Test the weighted sum is divided by the sum of weights used."""
        # Second octave samples (1, 1), a lattice point, so only the first
        # layer contributes: 0.25 / (1 + 0.5)
        assert octave_noise(0.5, 0.5, 2, 0.5, identity_table) == pytest.approx(0.25 / 1.5)

    def test_manual_three_octaves(self, shuffled_table):
        """Test three octaves equal the hand-built weighted average."""
        x, y = 7.37, 2.91
        expected = (
            perlin_noise(x, y, shuffled_table)
            + perlin_noise(x * 2, y * 2, shuffled_table) * 0.5
            + perlin_noise(x * 4, y * 4, shuffled_table) * 0.25
        ) / 1.75
        assert octave_noise(x, y, 3, 0.5, shuffled_table) == pytest.approx(expected)

    def test_deterministic(self, shuffled_table):
        """Test repeated calls are bit-identical."""
        results = {octave_noise(4.2, 8.4, 3, 0.5, shuffled_table) for _ in range(5)}
        assert len(results) == 1

    @pytest.mark.parametrize("octaves", [1, 3, 6])
    def test_output_range(self, octaves):
        """Test normalized output stays within [-1.01, 1.01]."""
        table = PermutationTable.shuffled(SeededRandomSource(octaves))
        for i in range(40):
            for j in range(40):
                value = octave_noise(i * 0.37 + 500, j * 0.41 + 250, octaves, 0.5, table)
                assert -1.01 <= value <= 1.01
