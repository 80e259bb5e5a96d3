"""Tests for sample generation."""

import numpy as np
import pytest

from corruption_sim.engine.sample_generator import generate_sample, sample_frame


class TestGenerateSample:
    """Tests for generate_sample."""

    def test_same_seed_same_sample(self) -> None:
        """Test that identical arguments give an identical sequence."""
        first = generate_sample(1000, 1.0, 1.0, 853)
        second = generate_sample(1000, 1.0, 1.0, 853)

        np.testing.assert_array_equal(first, second)

    def test_different_seed_different_sample(self) -> None:
        """Test that changing the seed changes the draws."""
        first = generate_sample(100, 1.0, 1.0, 1)
        second = generate_sample(100, 1.0, 1.0, 2)

        assert not np.array_equal(first, second)

    def test_length_and_moments(self, sample: np.ndarray) -> None:
        """Test size and rough location/scale of the reference sample."""
        assert len(sample) == 1000
        assert abs(sample.mean() - 1.0) < 0.1
        assert abs(sample.std() - 1.0) < 0.1

    def test_sample_is_read_only(self, sample: np.ndarray) -> None:
        """Test that the baseline sample cannot be mutated."""
        with pytest.raises(ValueError):
            sample[0] = 0.0

    def test_zero_sigma_is_constant(self) -> None:
        """Test that sigma=0 gives a constant sample."""
        sample = generate_sample(5, 2.5, 0.0, 0)

        np.testing.assert_array_equal(sample, np.full(5, 2.5))

    @pytest.mark.parametrize("n", [0, -10, 2.5, True])
    def test_invalid_size(self, n) -> None:
        """Test that a non-positive or non-integer size fails fast."""
        with pytest.raises(ValueError, match="n"):
            generate_sample(n, 1.0, 1.0, 853)

    def test_negative_sigma(self) -> None:
        """Test that a negative sigma fails fast."""
        with pytest.raises(ValueError, match="sigma"):
            generate_sample(10, 1.0, -0.5, 853)


class TestSampleFrame:
    """Tests for sample_frame."""

    def test_index_starts_at_one(self) -> None:
        """Test that observations are indexed 1..n."""
        series = sample_frame([0.5, 1.5, 2.5])

        assert list(series.index) == [1, 2, 3]
        assert series.name == "value"
        assert series.loc[3] == 2.5
