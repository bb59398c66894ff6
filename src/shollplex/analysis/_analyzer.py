"""Transformation and regression of intersection profiles."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from shollplex.analysis._descriptors import (
    ShollDescriptors,
    critical_point,
    polynomial_mean_value,
    ramification_index,
)
from shollplex.analysis._fitting import (
    FitResult,
    fit_exponential_with_offset,
    fit_polynomial,
    fit_power,
    fit_straight_line,
)
from shollplex.constants import MIN_FIT_POINTS, ShollMethod
from shollplex.errors import EmptyProfileError
from shollplex.profile import IntersectionProfile

logger = logging.getLogger(__name__)

CURVE_FITS: dict[ShollMethod, Callable[[np.ndarray, np.ndarray, int], FitResult]] = {
    ShollMethod.LINEAR: fit_polynomial,
    ShollMethod.NORMALIZED: fit_power,
    ShollMethod.SEMI_LOG: fit_straight_line,
    ShollMethod.LOG_LOG: fit_exponential_with_offset,
}


@dataclass(frozen=True)
class ShollAnalysis:
    """The analysed intersection profile.

    Parameters
    ----------
    method : ShollMethod
        The Sholl method.
    x : np.ndarray
        The transformed radii of the non-zero counts.
    y : np.ndarray
        The transformed non-zero counts.
    decay : float
        The Sholl decay: slope of the log of the normalized counts
        vs. radius.
    decay_r_squared : float
        Coefficient of determination of the decay fit.
    curve_fit : FitResult | None
        The curve fitted with the method's model.
        None if fitting was not performed.
    fitted_y : np.ndarray
        The fitted curve evaluated at x. Empty if fitting was not performed.
    descriptors : ShollDescriptors
        Critical value, critical radius, mean value and ramification index.
        Only defined for the linear method.
    notes : tuple[str, ...]
        Diagnostic messages.
    """

    method: ShollMethod
    x: np.ndarray
    y: np.ndarray
    decay: float
    decay_r_squared: float
    curve_fit: FitResult | None = None
    fitted_y: np.ndarray = field(default_factory=lambda: np.zeros(0))
    descriptors: ShollDescriptors = field(default_factory=ShollDescriptors)
    notes: tuple[str, ...] = ()

    @property
    def fit_performed(self) -> bool:
        """True if a curve was fitted."""
        return self.curve_fit is not None

    @property
    def r_squared(self) -> float:
        """Coefficient of determination of the curve fit."""
        if self.curve_fit is None:
            return np.nan
        return self.curve_fit.r_squared

    @property
    def polynomial_degree(self) -> int | None:
        """Degree of the fitted polynomial of the linear method."""
        if self.method != ShollMethod.LINEAR or self.curve_fit is None:
            return None
        return len(self.curve_fit.coefficients) - 1


def normalized_log_counts(
    radii: np.ndarray, counts: np.ndarray, is_3d: bool = False
) -> np.ndarray:
    """Log of the counts per area of circle (or volume of sphere).

    Parameters
    ----------
    radii : np.ndarray
        Positive radii.
    counts : np.ndarray
        Positive counts.
    is_3d : bool
        Normalize to the volume of spheres instead of the area of circles.

    Returns
    -------
    np.ndarray
        log(count / (pi r^2)) or log(count / (4/3 pi r^3)).
    """
    radii = np.asarray(radii, dtype=float)
    counts = np.asarray(counts, dtype=float)
    if is_3d:
        size = 4.0 / 3.0 * np.pi * radii**3
    else:
        size = np.pi * radii**2
    return np.log(counts / size)


def transform_profile(
    radii: np.ndarray,
    counts: np.ndarray,
    method: ShollMethod,
    is_3d: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """Transform the radii and counts to the axes of a Sholl method.

    Parameters
    ----------
    radii : np.ndarray
        Positive radii.
    counts : np.ndarray
        Positive counts.
    method : ShollMethod
        The Sholl method.
    is_3d : bool
        True if the counts were sampled on spheres.

    Returns
    -------
    x : np.ndarray
        log(radii) for the log-log method, the radii otherwise.
    y : np.ndarray
        The counts (linear), the counts per area or volume (normalized)
        or their log (semi-log and log-log).
    """
    method = ShollMethod(method)
    radii = np.asarray(radii, dtype=float)
    counts = np.asarray(counts, dtype=float)
    log_counts = normalized_log_counts(radii, counts, is_3d)

    x = np.log(radii) if method == ShollMethod.LOG_LOG else radii.copy()
    if method == ShollMethod.LINEAR:
        y = counts.copy()
    elif method == ShollMethod.NORMALIZED:
        y = np.exp(log_counts)
    else:
        y = log_counts
    return x, y


def _linear_descriptors(
    x: np.ndarray, y: np.ndarray, fit: FitResult, fitted_y: np.ndarray
) -> ShollDescriptors:
    critical_radius, critical_value = critical_point(x, fitted_y, fit.evaluate)
    mean_value = polynomial_mean_value(fit.coefficients, np.ptp(x))
    return ShollDescriptors(
        critical_value=critical_value,
        critical_radius=critical_radius,
        mean_value=mean_value,
        ramification_index=ramification_index(critical_value, y[0]),
    )


def analyze_profile(
    profile: IntersectionProfile,
    method: ShollMethod = ShollMethod.LINEAR,
    polynomial_degree: int = 5,
    fit_curve: bool = False,
) -> ShollAnalysis:
    """Analyze an intersection profile with a Sholl method.

    Radii without intersections are discarded. The Sholl decay is always
    computed. If fit_curve is True, the method's model is fitted to the
    transformed profile and, for the linear method, the morphometric
    descriptors are derived from the fitted polynomial.

    Parameters
    ----------
    profile : IntersectionProfile
        The sampled profile.
    method : ShollMethod
        The Sholl method. Default is linear.
    polynomial_degree : int
        Degree of the polynomial fitted by the linear method.
        Default is 5.
    fit_curve : bool
        Fit the transformed profile. Fitting is skipped if fewer than
        seven radii have intersections. Default is False.

    Returns
    -------
    ShollAnalysis
        The analysed profile.

    Raises
    ------
    EmptyProfileError
        If no radius has intersections.
    """
    method = ShollMethod(method)
    radii, counts = profile.nonzero()

    # the normalizations are undefined at the center
    positive = radii > 0
    radii = radii[positive]
    counts = counts[positive]
    if len(counts) == 0:
        raise EmptyProfileError("All intersection counts were zero")

    notes = []
    log_counts = normalized_log_counts(radii, counts, profile.is_3d)
    if len(radii) >= 2:
        decay_fit = fit_straight_line(radii, log_counts)
        decay = float(decay_fit.coefficients[1])
        decay_r_squared = decay_fit.r_squared
    else:
        decay_fit = None
        decay = decay_r_squared = np.nan
        notes.append("Sholl decay not computed: a single radius has intersections")

    x, y = transform_profile(radii, counts, method, profile.is_3d)

    if fit_curve and len(x) < MIN_FIT_POINTS:
        fit_curve = False
        notes.append("Curve fitting not performed: Not enough data points")
        logger.warning(
            f"Sholl [{method.value}]: curve fitting not performed, "
            f"{len(x)} radii with intersections (at least {MIN_FIT_POINTS} needed)"
        )

    if not fit_curve:
        return ShollAnalysis(
            method=method,
            x=x,
            y=y,
            decay=decay,
            decay_r_squared=decay_r_squared,
            notes=tuple(notes),
        )

    if method == ShollMethod.SEMI_LOG:
        # the semi-log profile is the decay regression
        fit = decay_fit
    else:
        try:
            fit = CURVE_FITS[method](x, y, polynomial_degree)
        except (RuntimeError, np.linalg.LinAlgError) as err:
            notes.append(f"Curve fitting failed: {err}")
            logger.warning(f"Sholl [{method.value}]: curve fitting failed: {err}")
            return ShollAnalysis(
                method=method,
                x=x,
                y=y,
                decay=decay,
                decay_r_squared=decay_r_squared,
                notes=tuple(notes),
            )

    fitted_y = fit.evaluate(x)
    if method == ShollMethod.LINEAR:
        descriptors = _linear_descriptors(x, y, fit, fitted_y)
    else:
        descriptors = ShollDescriptors.undefined()

    logger.debug(
        f"Sholl [{method.value}]: fitted {fit.name}, R^2 = {fit.r_squared:.3f}"
    )
    return ShollAnalysis(
        method=method,
        x=x,
        y=y,
        decay=decay,
        decay_r_squared=decay_r_squared,
        curve_fit=fit,
        fitted_y=fitted_y,
        descriptors=descriptors,
        notes=tuple(notes),
    )
