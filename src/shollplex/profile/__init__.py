"""Sampling of the intersection profile across a series of radii."""

from shollplex.profile._binning import combine_samples
from shollplex.profile._profiler import (
    IntersectionProfile,
    ProfileSummary,
    sample_profile,
)
from shollplex.profile._radii import radius_series, round_half_up, subsample_radii

__all__ = [
    "combine_samples",
    "IntersectionProfile",
    "ProfileSummary",
    "sample_profile",
    "radius_series",
    "round_half_up",
    "subsample_radii",
]
