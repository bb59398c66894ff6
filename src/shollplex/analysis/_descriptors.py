"""Morphometric descriptors derived from a fitted linear Sholl profile."""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from shollplex.constants import CRITICAL_SEARCH_STEPS


@dataclass(frozen=True)
class ShollDescriptors:
    """Descriptors of the fitted number of intersections.

    Parameters
    ----------
    critical_value : float
        The local maximum of the fitted polynomial.
    critical_radius : float
        The radius of the critical value.
    mean_value : float
        The mean of the fitted polynomial over the sampled range.
    ramification_index : float
        The critical value divided by the number of primary branches.
    """

    critical_value: float = np.nan
    critical_radius: float = np.nan
    mean_value: float = np.nan
    ramification_index: float = np.nan

    @classmethod
    def undefined(cls) -> "ShollDescriptors":
        """Descriptors of a method other than linear."""
        return cls()


def critical_point(
    x: np.ndarray,
    fitted_y: np.ndarray,
    function: Callable[[np.ndarray], np.ndarray],
    n_steps: int = CRITICAL_SEARCH_STEPS,
) -> tuple[float, float]:
    """Locate the local maximum of a fitted curve.

    The curve is evaluated at n_steps evenly spaced points between the
    midpoints separating the highest fitted sample from its neighbors.
    Values that are not positive are ignored, in which case
    (0, 0) is returned.

    Parameters
    ----------
    x : np.ndarray
        The sampled x values, in increasing order.
    fitted_y : np.ndarray
        The fitted curve evaluated at x.
    function : Callable[[np.ndarray], np.ndarray]
        The fitted curve.
    n_steps : int
        Number of evaluations. Default is 1000.

    Returns
    -------
    critical_x : float
        The location of the maximum.
    critical_y : float
        The value of the maximum.
    """
    x = np.asarray(x, dtype=float)
    fitted_y = np.asarray(fitted_y, dtype=float)
    if len(x) == 0:
        raise ValueError("Cannot search the maximum of an empty curve")

    max_index = int(np.argmax(fitted_y))
    left = (x[max(max_index - 1, 0)] + x[max_index]) / 2
    right = (x[min(max_index + 1, len(x) - 1)] + x[max_index]) / 2
    step = (right - left) / n_steps

    candidates = left + np.arange(n_steps) * step
    values = np.asarray(function(candidates), dtype=float)
    best = int(np.argmax(values))
    if not values[best] > 0:
        return 0.0, 0.0
    return float(candidates[best]), float(values[best])


def polynomial_mean_value(coefficients: np.ndarray, x_range: float) -> float:
    """Mean value of a polynomial over an interval of width x_range.

    This is the height of the rectangle with the same area as the area
    under the polynomial, computed from its antiderivative:
    sum(c_i / (i + 1) * x_range^i).

    Parameters
    ----------
    coefficients : np.ndarray
        The polynomial coefficients, from the constant term upwards.
    x_range : float
        The width of the interval.

    Returns
    -------
    float
        The mean value.
    """
    coefficients = np.asarray(coefficients, dtype=float)
    powers = np.arange(len(coefficients))
    return float(np.sum(coefficients / (powers + 1) * np.power(x_range, powers)))


def ramification_index(critical_value: float, primary_branches: float) -> float:
    """Schoenen ramification index."""
    if primary_branches == 0:
        return np.nan
    return critical_value / primary_branches
