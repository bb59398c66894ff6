"""Regression analysis of Sholl profiles."""

from shollplex.analysis._analyzer import (
    CURVE_FITS,
    ShollAnalysis,
    analyze_profile,
    normalized_log_counts,
    transform_profile,
)
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
    r_squared,
)

__all__ = [
    "CURVE_FITS",
    "ShollAnalysis",
    "analyze_profile",
    "normalized_log_counts",
    "transform_profile",
    "ShollDescriptors",
    "critical_point",
    "polynomial_mean_value",
    "ramification_index",
    "FitResult",
    "fit_exponential_with_offset",
    "fit_polynomial",
    "fit_power",
    "fit_straight_line",
    "r_squared",
]
