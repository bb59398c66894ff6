import numpy as np

from shollplex.config import ThresholdBand
from shollplex.counting import ThresholdClassifier
from shollplex.data import draw_ball
from shollplex.io import make_intersections_mask


def test_make_intersections_mask(star_image, binary_band):
    """Foreground pixels on each band are painted with the band value."""
    classifier = ThresholdClassifier(star_image, binary_band)

    mask = make_intersections_mask(
        classifier,
        np.array([50, 50]),
        values=np.array([1.0, 2.0]),
        start_radius=10,
        end_radius=30,
    )

    assert mask.dtype == np.float32
    assert mask.shape == star_image.shape
    # bands are [10, 20) and [20, 30) pixels along the +x branch
    assert mask[50, 60] == 1.0
    assert mask[50, 69] == 1.0
    assert mask[50, 70] == 2.0
    assert mask[50, 79] == 2.0
    assert mask[50, 80] == 0.0
    # background is never painted
    assert np.all(mask[star_image == 0] == 0)


def test_make_intersections_mask_empty(star_image, binary_band):
    """Without values nothing is painted."""
    classifier = ThresholdClassifier(star_image, binary_band)

    mask = make_intersections_mask(classifier, np.array([50, 50]), np.array([]), 0, 10)

    assert not np.any(mask)


def test_make_intersections_mask_3d():
    """3D images are painted on their projection."""
    image = np.zeros((11, 31, 31), dtype=np.uint8)
    draw_ball(image, (15, 15, 5), 4)
    classifier = ThresholdClassifier(image, ThresholdBand(lower=255, upper=255))

    mask = make_intersections_mask(
        classifier, np.array([15, 15, 5]), np.array([3.0]), 1, 4
    )

    assert mask.shape == (31, 31)
    assert mask[15, 17] == 3.0
    assert mask[15, 25] == 0.0
