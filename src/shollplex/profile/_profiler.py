"""Sampling the intersection profile of an arbor."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np

from shollplex.constants import CombineMode, ProfileStatus
from shollplex.counting import ThresholdClassifier, count_intersections
from shollplex.profile._binning import combine_samples
from shollplex.profile._radii import round_half_up, subsample_radii
from shollplex.sampling import (
    BoundingRegion,
    iter_sphere_shell_slices,
    sample_circle,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProfileSummary:
    """Summary statistics of an intersection profile.

    Parameters
    ----------
    n_radii : int
        Number of sampled radii.
    sum_intersections : float
        Sum of the counts over all radii.
    mean_intersections : float
        Mean count over all sampled radii, zeros included.
    n_zero : int
        Number of radii without intersections.
    max_intersections : float
        The largest count.
    max_radius : float
        The radius of the largest count. NaN for an empty profile.
    """

    n_radii: int
    sum_intersections: float
    mean_intersections: float
    n_zero: int
    max_intersections: float
    max_radius: float


@dataclass(frozen=True)
class IntersectionProfile:
    """The number of intersections at each sampled radius.

    Parameters
    ----------
    radii : np.ndarray
        Strictly increasing radii in physical units.
    counts : np.ndarray
        Number of intersections at each radius.
    center : np.ndarray
        (x, y[, z]) center of the analysis in pixels.
    status : ProfileStatus
        CANCELLED if sampling stopped before the last radius.
    """

    radii: np.ndarray
    counts: np.ndarray
    center: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=int))
    status: ProfileStatus = ProfileStatus.COMPLETE

    def __post_init__(self):
        radii = np.asarray(self.radii, dtype=float).reshape(-1)
        counts = np.asarray(self.counts, dtype=float).reshape(-1)
        if len(radii) != len(counts):
            raise ValueError(
                f"radii and counts must have the same length, "
                f"got {len(radii)} and {len(counts)}"
            )
        if np.any(np.diff(radii) <= 0):
            raise ValueError("radii must be strictly increasing")
        if np.any(counts < 0):
            raise ValueError("counts must be non-negative")
        object.__setattr__(self, "radii", radii)
        object.__setattr__(self, "counts", counts)
        object.__setattr__(self, "center", np.asarray(self.center, dtype=int))

    def __len__(self) -> int:
        return len(self.radii)

    @property
    def ndim(self) -> int:
        """Number of dimensions of the sampled image."""
        return len(self.center)

    @property
    def is_3d(self) -> bool:
        """True if the profile was sampled on spheres."""
        return self.ndim == 3

    @property
    def is_complete(self) -> bool:
        """True if every radius was sampled."""
        return self.status == ProfileStatus.COMPLETE

    def nonzero(self) -> tuple[np.ndarray, np.ndarray]:
        """Get the radii and counts of the radii with intersections."""
        mask = self.counts != 0
        return self.radii[mask], self.counts[mask]

    def summary(self) -> ProfileSummary:
        """Compute the summary statistics of the profile."""
        n_radii = len(self.radii)
        if n_radii == 0:
            return ProfileSummary(0, 0.0, np.nan, 0, 0.0, np.nan)

        max_index = int(np.argmax(self.counts))
        total = float(np.sum(self.counts))
        return ProfileSummary(
            n_radii=n_radii,
            sum_intersections=total,
            mean_intersections=total / n_radii,
            n_zero=int(np.count_nonzero(self.counts == 0)),
            max_intersections=float(self.counts[max_index]),
            max_radius=float(self.radii[max_index]),
        )


def _never_cancelled() -> bool:
    return False


def _sample_radius_2d(
    center: np.ndarray,
    radius: float,
    classifier: ThresholdClassifier,
    region: BoundingRegion,
    samples_per_radius: int,
    combine_mode: CombineMode,
    spike_suppression: bool,
) -> float:
    samples = np.zeros(samples_per_radius)
    for index, sub_radius in enumerate(subsample_radii(radius, samples_per_radius)):
        points = sample_circle(center, sub_radius, region)
        samples[index] = count_intersections(
            points, classifier, spike_suppression=spike_suppression
        )
    return combine_samples(samples, combine_mode)


def sample_profile(
    classifier: ThresholdClassifier,
    center: np.ndarray,
    radii: np.ndarray,
    region: BoundingRegion | None = None,
    voxel_size: float = 1.0,
    samples_per_radius: int = 1,
    combine_mode: CombineMode = CombineMode.MEAN,
    spike_suppression: bool = False,
    is_cancelled: Callable[[], bool] | None = None,
    report_progress: Callable[[int, int], None] | None = None,
) -> IntersectionProfile:
    """Count the intersections of the arbor with circles (spheres).

    For 2D images, samples_per_radius circles are sampled around each
    radius and their counts are combined. For 3D images, a single
    sphere shell is sampled per radius.

    Sampling can be cancelled: is_cancelled is polled before each radius
    (2D) or before each z-slice of a sphere (3D). The radii sampled so
    far are returned with a CANCELLED status.

    Parameters
    ----------
    classifier : ThresholdClassifier
        Classifies the pixels of the image as foreground.
    center : np.ndarray
        (x, y) or (x, y, z) center of the analysis in pixels.
    radii : np.ndarray
        Strictly increasing radii in physical units.
    region : BoundingRegion | None
        Only pixels inside this region are sampled.
        If None, the whole image is sampled.
    voxel_size : float
        Physical size of a pixel (voxel). Default is 1.
    samples_per_radius : int
        Number of circles sampled around each radius (2D only).
        Default is 1.
    combine_mode : CombineMode
        How the samples of one radius are combined.
        Default is the mean.
    spike_suppression : bool
        Discard single pixel groups on the edge of a stair of foreground
        pixels (2D only). Default is False.
    is_cancelled : Callable[[], bool] | None
        Returns True when sampling should stop.
    report_progress : Callable[[int, int], None] | None
        Called with (number of sampled radii, number of radii).

    Returns
    -------
    IntersectionProfile
        The sampled profile.
    """
    center = np.asarray(center, dtype=int)
    radii = np.asarray(radii, dtype=float)
    if len(center) != classifier.ndim:
        raise ValueError(
            f"center has {len(center)} dimensions, image has {classifier.ndim}"
        )
    if region is None:
        region = BoundingRegion(
            min_bounds=np.zeros(classifier.ndim, dtype=int),
            max_bounds=np.asarray(classifier.image.shape[::-1]) - 1,
        )
    if is_cancelled is None:
        is_cancelled = _never_cancelled

    is_3d = classifier.ndim == 3
    n_radii = len(radii)
    counts = []
    status = ProfileStatus.COMPLETE

    for radius in radii:
        if is_3d:
            count = _sample_radius_3d(
                center, radius / voxel_size, classifier, region, is_cancelled
            )
        elif is_cancelled():
            count = None
        else:
            count = _sample_radius_2d(
                center,
                radius / voxel_size,
                classifier,
                region,
                samples_per_radius,
                combine_mode,
                spike_suppression,
            )

        if count is None:
            status = ProfileStatus.CANCELLED
            logger.info(f"Sampling cancelled after {len(counts)}/{n_radii} radii")
            break

        counts.append(count)
        if report_progress is not None:
            report_progress(len(counts), n_radii)

    return IntersectionProfile(
        radii=radii[: len(counts)],
        counts=np.asarray(counts, dtype=float),
        center=center,
        status=status,
    )


def _sample_radius_3d(
    center: np.ndarray,
    radius: float,
    classifier: ThresholdClassifier,
    region: BoundingRegion,
    is_cancelled: Callable[[], bool],
) -> float | None:
    """Count the intersections with one sphere.

    Returns None if sampling was cancelled.
    """
    if is_cancelled():
        return None

    foreground = []
    shell_radius = int(round_half_up(radius))
    for _, shell in iter_sphere_shell_slices(center, shell_radius, region):
        if is_cancelled():
            return None
        foreground.append(classifier.foreground_points(shell))

    if len(foreground) == 0:
        return 0.0
    points = np.concatenate(foreground, axis=0)
    return float(count_intersections(points, classifier, points_are_foreground=True))
