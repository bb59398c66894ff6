"""Running a complete Sholl analysis on a segmented image."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from shollplex.analysis import ShollAnalysis, analyze_profile
from shollplex.config import ShollConfig, ThresholdBand
from shollplex.counting import ThresholdClassifier
from shollplex.errors import EmptyProfileError
from shollplex.io import export_analysis
from shollplex.profile import (
    IntersectionProfile,
    radius_series,
    round_half_up,
    sample_profile,
)
from shollplex.sampling import BoundingRegion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShollResult:
    """The result of a Sholl analysis run.

    Parameters
    ----------
    config : ShollConfig
        The parameters of the run.
    threshold : ThresholdBand
        The foreground band.
    region : BoundingRegion
        The sampled region of the image.
    profile : IntersectionProfile
        The sampled intersection profile.
    analysis : ShollAnalysis | None
        The analysed profile. None if the run was cancelled before
        any intersection was found.
    export_path : Path | None
        Path of the exported profile table, if it was written.
    """

    config: ShollConfig
    threshold: ThresholdBand
    region: BoundingRegion
    profile: IntersectionProfile
    analysis: ShollAnalysis | None = None
    export_path: Path | None = None

    @property
    def is_complete(self) -> bool:
        """True if every radius was sampled."""
        return self.profile.is_complete


def run_analysis(
    image: np.ndarray,
    center: np.ndarray,
    config: ShollConfig | None = None,
    threshold: ThresholdBand | None = None,
    is_cancelled: Callable[[], bool] | None = None,
    report_progress: Callable[[int, int], None] | None = None,
    export_path: str | Path | None = None,
) -> ShollResult:
    """Perform a Sholl analysis of a segmented arbor.

    Parameters
    ----------
    image : np.ndarray
        The segmented 2D (y, x) or 3D (z, y, x) image. A 3D image with a
        single z-slice is analysed as 2D.
    center : np.ndarray
        (x, y) or (x, y, z) center of the analysis in pixels.
    config : ShollConfig | None
        The parameters of the analysis. If None, the defaults are used.
    threshold : ThresholdBand | None
        The foreground band. If None, it is derived from the image,
        which must then be binary.
    is_cancelled : Callable[[], bool] | None
        Polled during sampling. When it returns True, the radii sampled
        so far are analysed and returned with a cancelled status.
    report_progress : Callable[[int, int], None] | None
        Called with (number of sampled radii, number of radii).
    export_path : str | Path | None
        If set, the profile table is written to this CSV file.
        Failures to write are logged and do not stop the analysis.

    Returns
    -------
    ShollResult
        The profile and its analysis.

    Raises
    ------
    InvalidConfigurationError
        If the radii do not form a series of at least two samples.
    EmptyProfileError
        If all intersection counts are zero.
    """
    if config is None:
        config = ShollConfig()

    image = np.asarray(image)
    center = np.asarray(center, dtype=int)
    if image.ndim == 3 and image.shape[0] == 1:
        image = image[0]
        center = center[:2]
    is_3d = image.ndim == 3

    if threshold is None:
        threshold = ThresholdBand.from_image(image)
    classifier = ThresholdClassifier(image, threshold)

    voxel_size = config.calibration.voxel_size(is_3d)
    radii = radius_series(
        config.start_radius, config.end_radius, config.effective_step(is_3d)
    )
    max_radius = int(round_half_up(radii[-1] / voxel_size))
    region = BoundingRegion.from_image_shape(
        image.shape, center, max_radius, trim=config.trim
    )

    logger.info(
        f"Sampling {len(radii)} radii, "
        f"{1 if is_3d else config.samples_per_radius} measurement(s) per radius"
    )
    profile = sample_profile(
        classifier,
        center,
        radii,
        region=region,
        voxel_size=voxel_size,
        samples_per_radius=config.samples_per_radius,
        combine_mode=config.combine_mode,
        spike_suppression=config.spike_suppression,
        is_cancelled=is_cancelled,
        report_progress=report_progress,
    )

    try:
        analysis = analyze_profile(
            profile,
            method=config.method,
            polynomial_degree=config.polynomial_degree,
            fit_curve=config.fit_curve,
        )
    except EmptyProfileError:
        if profile.is_complete:
            logger.error("All intersection counts were zero")
            raise
        analysis = None

    written_path = None
    if export_path is not None and analysis is not None:
        written_path = export_analysis(
            analysis, export_path, unit=config.calibration.unit, is_3d=is_3d
        )

    return ShollResult(
        config=config,
        threshold=threshold,
        region=region,
        profile=profile,
        analysis=analysis,
        export_path=written_path,
    )
