"""Regression models fitted to Sholl profiles.

Every fit strategy is a function of (x, y, degree) returning a FitResult.
The degree is only used by the polynomial.
"""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.polynomial import polynomial
from scipy.optimize import curve_fit

# upper bound on model evaluations for the nonlinear fits
MAX_FUNCTION_EVALUATIONS = 25000


@dataclass(frozen=True)
class FitResult:
    """A fitted regression model.

    Parameters
    ----------
    name : str
        Name of the model.
    coefficients : np.ndarray
        The fitted parameters, in the order taken by function.
    r_squared : float
        Coefficient of determination of the fit.
    function : Callable
        The model, called as function(x, *coefficients).
    """

    name: str
    coefficients: np.ndarray
    r_squared: float
    function: Callable[..., np.ndarray]

    def evaluate(self, x: np.ndarray) -> np.ndarray:
        """Evaluate the fitted model."""
        return self.function(np.asarray(x, dtype=float), *self.coefficients)


def r_squared(y: np.ndarray, fitted: np.ndarray) -> float:
    """Coefficient of determination of fitted values.

    Returns NaN when y is constant.
    """
    y = np.asarray(y, dtype=float)
    residual_sum = np.sum((y - fitted) ** 2)
    total_sum = np.sum((y - np.mean(y)) ** 2)
    if total_sum == 0:
        return np.nan
    return float(1.0 - residual_sum / total_sum)


def _check_series(x: np.ndarray, y: np.ndarray, n_parameters: int):
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape or x.ndim != 1:
        raise ValueError("x and y must be 1D arrays of the same length")
    if len(x) < n_parameters:
        raise ValueError(
            f"At least {n_parameters} points are needed, got {len(x)}"
        )
    return x, y


def polynomial_function(x: np.ndarray, *coefficients: float) -> np.ndarray:
    """Polynomial y = c0 + c1 x + c2 x^2 + ..."""
    return polynomial.polyval(x, coefficients)


def line_function(x: np.ndarray, intercept: float, slope: float) -> np.ndarray:
    """Straight line y = a + b x."""
    return intercept + slope * x


def power_function(x: np.ndarray, a: float, b: float) -> np.ndarray:
    """Power law y = a x^b."""
    return a * np.power(x, b)


def exponential_with_offset_function(
    x: np.ndarray, a: float, b: float, c: float
) -> np.ndarray:
    """Exponential decay with offset y = a exp(-b x) + c."""
    return a * np.exp(-b * x) + c


def fit_straight_line(x: np.ndarray, y: np.ndarray, degree: int = 1) -> FitResult:
    """Fit y = a + b x by least squares.

    The coefficients are (intercept, slope).
    """
    x, y = _check_series(x, y, 2)
    coefficients = polynomial.polyfit(x, y, 1)
    return FitResult(
        name="straight line",
        coefficients=coefficients,
        r_squared=r_squared(y, line_function(x, *coefficients)),
        function=line_function,
    )


def fit_polynomial(x: np.ndarray, y: np.ndarray, degree: int = 5) -> FitResult:
    """Fit a polynomial by least squares.

    The coefficients are ordered from the constant term upwards.
    """
    if degree < 0:
        raise ValueError(f"degree must be non-negative, got {degree}")
    x, y = _check_series(x, y, 2)
    coefficients = polynomial.polyfit(x, y, degree)
    return FitResult(
        name=f"polynomial (degree {degree})",
        coefficients=coefficients,
        r_squared=r_squared(y, polynomial_function(x, *coefficients)),
        function=polynomial_function,
    )


def fit_power(x: np.ndarray, y: np.ndarray, degree: int = 1) -> FitResult:
    """Fit y = a x^b.

    The fit starts from the least squares line of log(y) vs. log(x).
    """
    x, y = _check_series(x, y, 2)
    if np.any(x <= 0) or np.any(y <= 0):
        raise ValueError("The power law is only fitted to positive values")

    log_fit = polynomial.polyfit(np.log(x), np.log(y), 1)
    initial = (np.exp(log_fit[0]), log_fit[1])
    coefficients, _ = curve_fit(
        power_function, x, y, p0=initial, maxfev=MAX_FUNCTION_EVALUATIONS
    )
    return FitResult(
        name="power",
        coefficients=coefficients,
        r_squared=r_squared(y, power_function(x, *coefficients)),
        function=power_function,
    )


def fit_exponential_with_offset(
    x: np.ndarray, y: np.ndarray, degree: int = 1
) -> FitResult:
    """Fit y = a exp(-b x) + c."""
    x, y = _check_series(x, y, 3)

    x_range = np.ptp(x)
    initial = (
        y[0] - y[-1],
        1.0 / x_range if x_range > 0 else 1.0,
        y[-1],
    )
    coefficients, _ = curve_fit(
        exponential_with_offset_function,
        x,
        y,
        p0=initial,
        maxfev=MAX_FUNCTION_EVALUATIONS,
    )
    return FitResult(
        name="exponential with offset",
        coefficients=coefficients,
        r_squared=r_squared(y, exponential_with_offset_function(x, *coefficients)),
        function=exponential_with_offset_function,
    )
