"""Heat map of a Sholl profile painted over the arbor."""

import numpy as np

from shollplex.counting import ThresholdClassifier
from shollplex.profile import round_half_up
from shollplex.sampling import BoundingRegion, sample_circle


def make_intersections_mask(
    classifier: ThresholdClassifier,
    center: np.ndarray,
    values: np.ndarray,
    start_radius: float,
    end_radius: float,
    region: BoundingRegion | None = None,
) -> np.ndarray:
    """Paint the foreground of an image with the values of a Sholl profile.

    The range from start_radius to end_radius is split in one band per
    value. Every foreground pixel on the circles of a band is set to the
    band's value. 3D images are painted on their maximum intensity
    projection over the z range of the region.

    Parameters
    ----------
    classifier : ThresholdClassifier
        Classifies the pixels of the analysed image.
    center : np.ndarray
        (x, y[, z]) center of the analysis in pixels.
    values : np.ndarray
        One value per band, from the center outwards.
    start_radius : float
        The first radius in pixels.
    end_radius : float
        The last radius in pixels.
    region : BoundingRegion | None
        The analysed region. If None, the whole image is used.

    Returns
    -------
    np.ndarray
        A float32 (y, x) image. Pixels that were not painted are 0.
    """
    values = np.asarray(values, dtype=float)
    center = np.asarray(center, dtype=int)
    image = classifier.image

    if classifier.ndim == 3:
        z_min, z_max = 0, image.shape[0] - 1
        if region is not None:
            z_min, z_max = region.min_bounds[2], region.max_bounds[2]
        image = np.max(image[z_min : z_max + 1], axis=0)
        classifier = ThresholdClassifier(image, classifier.band)
        center = center[:2]
        if region is not None:
            region = BoundingRegion(region.min_bounds[:2], region.max_bounds[:2])

    mask = np.zeros(image.shape, dtype=np.float32)
    n_bands = len(values)
    if n_bands == 0:
        return mask

    first_radius = int(round_half_up(start_radius))
    band_width = max(1, int(round_half_up((end_radius - start_radius) / n_bands)))

    for band, value in enumerate(values):
        band_start = first_radius + band * band_width
        for radius in range(band_start, band_start + band_width):
            points = classifier.foreground_points(sample_circle(center, radius, region))
            mask[points[:, 1], points[:, 0]] = value
    return mask
