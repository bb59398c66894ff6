import numpy as np
import pytest

from shollplex.config import ThresholdBand
from shollplex.counting import ThresholdClassifier, count_intersections
from shollplex.sampling import sample_circle


def test_is_foreground_band():
    """Values inside the inclusive band are foreground."""
    image = np.array([[0, 10, 20], [30, 40, 50]], dtype=np.uint16)
    classifier = ThresholdClassifier(image, ThresholdBand(lower=20, upper=40))

    # (x, y) coordinates
    points = np.array([[0, 0], [1, 0], [2, 0], [0, 1], [1, 1], [2, 1]])
    mask = classifier.is_foreground(points)

    np.testing.assert_array_equal(mask, [False, False, True, True, True, False])


def test_is_foreground_outside_image():
    """Coordinates outside of the image are background."""
    image = np.full((3, 3), 255, dtype=np.uint8)
    classifier = ThresholdClassifier(image, ThresholdBand(lower=255, upper=255))

    mask = classifier.is_foreground(np.array([[-1, 0], [0, 3], [1, 1]]))

    np.testing.assert_array_equal(mask, [False, False, True])


def test_values_3d():
    """3D coordinates are (x, y, z) and the image is (z, y, x)."""
    image = np.zeros((3, 4, 5), dtype=np.uint8)
    image[2, 1, 4] = 7
    classifier = ThresholdClassifier(image, ThresholdBand(lower=7, upper=7))

    np.testing.assert_array_equal(classifier.values(np.array([[4, 1, 2]])), [7])
    np.testing.assert_array_equal(
        classifier.foreground_points(np.array([[4, 1, 2], [0, 0, 0]])), [[4, 1, 2]]
    )


def test_classifier_invalid_image():
    """Only 2D and 3D images are classified."""
    with pytest.raises(ValueError):
        ThresholdClassifier(np.zeros(5), ThresholdBand(lower=1, upper=1))


def test_count_intersections_two_blobs():
    """Two blobs crossing a circle at different angles are two intersections."""
    image = np.zeros((41, 41), dtype=np.uint8)
    # blob crossing the circle of radius 10 around (20, 20) on the +x axis
    image[18:23, 28:33] = 255
    # blob crossing on the -y axis
    image[8:13, 18:23] = 255
    classifier = ThresholdClassifier(image, ThresholdBand(lower=255, upper=255))

    points = sample_circle(np.array([20, 20]), 10)

    assert count_intersections(points, classifier) == 2
    assert count_intersections(points, classifier, spike_suppression=True) == 2
