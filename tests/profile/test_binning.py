import numpy as np
import pytest

from shollplex.constants import CombineMode
from shollplex.profile import combine_samples


def test_combine_mean():
    """The mean of the samples."""
    assert combine_samples(np.array([1, 2, 6]), CombineMode.MEAN) == 3.0


def test_combine_median_odd():
    """The median of an odd number of samples is the central value."""
    assert combine_samples(np.array([7, 1, 3]), CombineMode.MEDIAN) == 3.0


def test_combine_median_even():
    """The median of an even number of samples averages the central values."""
    assert combine_samples(np.array([8, 1, 4, 3]), CombineMode.MEDIAN) == 3.5


def test_combine_single_sample():
    """A single sample is returned unchanged."""
    assert combine_samples(np.array([4]), CombineMode.MEDIAN) == 4.0
    assert combine_samples(np.array([4]), CombineMode.MEAN) == 4.0


def test_combine_empty():
    """Empty samples cannot be combined."""
    with pytest.raises(ValueError):
        combine_samples(np.array([]))
