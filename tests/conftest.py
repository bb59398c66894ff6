"""Fixtures for testing with Pytest."""

import numpy as np
import pytest

from shollplex.config import ThresholdBand
from shollplex.counting import ThresholdClassifier
from shollplex.data import draw_disk, draw_star_arbor


@pytest.fixture
def disk_image():
    """Return a 101x101 image with a disk of radius 5 centered at (50, 50)."""
    image = np.zeros((101, 101), dtype=np.uint8)
    draw_disk(image, (50, 50), 5)
    return image


@pytest.fixture
def binary_band():
    """Return the threshold band of a binary image with foreground 255."""
    return ThresholdBand(lower=255, upper=255)


@pytest.fixture
def disk_classifier(disk_image, binary_band):
    """Return a classifier of the disk image."""
    return ThresholdClassifier(disk_image, binary_band)


@pytest.fixture
def star_image():
    """Return a star arbor with four axis-aligned branches of length 40.

    The soma has a radius of 3 and the arbor is centered at (50, 50).
    """
    return draw_star_arbor(
        shape=(101, 101),
        center=(50, 50),
        n_branches=4,
        branch_length=40,
        soma_radius=3,
    )


@pytest.fixture
def decaying_profile_counts():
    """Return radii and counts of a profile that rises then decays.

    The counts follow a smooth bump peaking at a radius of 30.
    """
    radii = np.arange(5, 80, 5, dtype=float)
    counts = np.round(2 + 10 * np.exp(-(((radii - 30) / 15) ** 2)))
    return radii, counts
