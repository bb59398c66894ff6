"""Radii sampled by a Sholl analysis."""

import numpy as np

from shollplex.errors import InvalidConfigurationError


def round_half_up(values: np.ndarray | float) -> np.ndarray:
    """Round to the nearest integer, rounding halves up.

    numpy rounds halves to the nearest even number, which would sample
    a different set of pixels.
    """
    return np.floor(np.asarray(values, dtype=float) + 0.5).astype(int)


def radius_series(start: float, end: float, step: float) -> np.ndarray:
    """Make the series of radii from start to end.

    Parameters
    ----------
    start : float
        The first radius.
    end : float
        The largest radius. It is included if it falls on a step.
    step : float
        The distance between consecutive radii.

    Returns
    -------
    np.ndarray
        The strictly increasing radii.
    """
    if start < 0 or end < 0:
        raise InvalidConfigurationError("Radii must be non-negative")
    if step <= 0:
        raise InvalidConfigurationError("Radius step size must be positive")
    if end <= start:
        raise InvalidConfigurationError(
            "Ending radius must be larger than the starting radius"
        )

    n_samples = int((end - start) / step) + 1
    if n_samples <= 1:
        raise InvalidConfigurationError(
            "Ending radius must be larger than the starting radius and the "
            f"radius step size ({step}) must be smaller than the sampled range"
        )
    return start + np.arange(n_samples) * step


def subsample_radii(radius: float, n_samples: int) -> np.ndarray:
    """Get the integer radii sampled around a radius.

    The sub-samples start n_samples // 2 pixels beyond the radius and
    decrease by one pixel each. Close to the center the last sub-samples
    can be negative, in which case they sample no pixels.

    Parameters
    ----------
    radius : float
        The nominal radius in pixels.
    n_samples : int
        The number of sub-samples.

    Returns
    -------
    np.ndarray
        (n_samples,) array of decreasing radii in pixels.
    """
    if n_samples < 1:
        raise ValueError(f"n_samples must be at least 1, got {n_samples}")
    largest = round_half_up(radius + n_samples // 2)
    return largest - np.arange(n_samples)
