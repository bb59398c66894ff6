"""Combining the samples taken for a radius."""

import numpy as np

from shollplex.constants import CombineMode


def combine_samples(samples: np.ndarray, mode: CombineMode = CombineMode.MEAN) -> float:
    """Combine the intersection counts of the sub-samples of one radius.

    Parameters
    ----------
    samples : np.ndarray
        The counts of each sub-sample.
    mode : CombineMode
        MEAN takes the arithmetic mean. MEDIAN takes the central value,
        or the average of the two central values for an even number
        of samples.

    Returns
    -------
    float
        The combined count.
    """
    samples = np.asarray(samples, dtype=float)
    if len(samples) == 0:
        raise ValueError("Cannot combine an empty set of samples")
    if len(samples) == 1:
        return float(samples[0])

    mode = CombineMode(mode)
    if mode == CombineMode.MEDIAN:
        return float(np.median(samples))
    return float(np.mean(samples))
