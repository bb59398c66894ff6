import numpy as np
import pandas as pd
import pytest

from shollplex.config import Calibration, ShollConfig, ThresholdBand
from shollplex.constants import ProfileStatus, ShollMethod, Trim
from shollplex.data import draw_ball
from shollplex.errors import EmptyProfileError, InvalidConfigurationError
from shollplex.run import run_analysis


def test_run_analysis_disk(disk_image):
    """Test the complete analysis of a solid disk."""
    config = ShollConfig(start_radius=1, end_radius=7, step_size=1)

    result = run_analysis(disk_image, np.array([50, 50]), config)

    assert result.is_complete
    np.testing.assert_array_equal(result.profile.radii, np.arange(1, 8))
    np.testing.assert_array_equal(result.profile.counts, [1, 1, 1, 1, 1, 0, 0])
    assert result.threshold == ThresholdBand(lower=255, upper=255)
    np.testing.assert_array_equal(result.region.min_bounds, [43, 43])
    np.testing.assert_array_equal(result.region.max_bounds, [57, 57])

    # radii without intersections are not analysed
    np.testing.assert_array_equal(result.analysis.x, np.arange(1, 6))
    assert not result.analysis.fit_performed
    assert result.analysis.decay < 0


def test_run_analysis_empty_profile(disk_image, binary_band):
    """A complete profile without intersections is an error."""
    config = ShollConfig(start_radius=1, end_radius=7, step_size=1)

    with pytest.raises(EmptyProfileError):
        run_analysis(disk_image, np.array([10, 10]), config, threshold=binary_band)


def test_run_analysis_empty_image():
    """An image without foreground gives an empty profile."""
    image = np.zeros((51, 51), dtype=np.uint8)
    config = ShollConfig(start_radius=1, end_radius=20)

    with pytest.raises(EmptyProfileError):
        run_analysis(image, np.array([25, 25]), config)


def test_run_analysis_subsamples_near_center(disk_image):
    """Many sub-samples around small radii are valid."""
    config = ShollConfig(start_radius=1, end_radius=20, samples_per_radius=5)

    result = run_analysis(disk_image, np.array([50, 50]), config)

    assert result.is_complete
    assert len(result.profile) == 20
    # circles of radius 3, 2, 1, 0 and -1
    assert result.profile.counts[0] == pytest.approx(0.8)


def test_run_analysis_cancelled(disk_image):
    """A cancelled run analyses the radii sampled so far."""
    config = ShollConfig(start_radius=1, end_radius=7, step_size=1)
    progress = []

    result = run_analysis(
        disk_image,
        np.array([50, 50]),
        config,
        is_cancelled=lambda: len(progress) >= 2,
        report_progress=lambda done, total: progress.append((done, total)),
    )

    assert not result.is_complete
    assert result.profile.status == ProfileStatus.CANCELLED
    np.testing.assert_array_equal(result.profile.counts, [1, 1])
    np.testing.assert_array_equal(result.analysis.x, [1, 2])


def test_run_analysis_cancelled_before_sampling(disk_image):
    """Cancelling before the first radius gives an empty profile."""
    config = ShollConfig(start_radius=1, end_radius=7, step_size=1)

    result = run_analysis(
        disk_image, np.array([50, 50]), config, is_cancelled=lambda: True
    )

    assert len(result.profile) == 0
    assert result.analysis is None


def test_run_analysis_star_fit(star_image):
    """The profile of a star is constant outside of the soma."""
    config = ShollConfig(
        start_radius=5,
        end_radius=40,
        step_size=5,
        fit_curve=True,
        polynomial_degree=4,
    )

    result = run_analysis(star_image, np.array([50, 50]), config)

    np.testing.assert_array_equal(result.profile.counts, np.full(8, 4))
    assert result.analysis.fit_performed
    np.testing.assert_allclose(result.analysis.fitted_y, 4, atol=1e-6)
    np.testing.assert_allclose(result.analysis.descriptors.critical_value, 4, atol=1e-6)
    np.testing.assert_allclose(
        result.analysis.descriptors.ramification_index, 1, atol=1e-6
    )


@pytest.mark.parametrize(
    "trim,expected_count", [(Trim.NONE, 4), (Trim.ABOVE, 3), (Trim.RIGHT, 3)]
)
def test_run_analysis_trim(star_image, trim, expected_count):
    """Trimming removes the branches on the other side of the center."""
    config = ShollConfig(start_radius=10, end_radius=30, step_size=10, trim=trim)

    result = run_analysis(star_image, np.array([50, 50]), config)

    np.testing.assert_array_equal(result.profile.counts, np.full(3, expected_count))


def test_run_analysis_calibrated(disk_image):
    """Radii are in calibrated units."""
    config = ShollConfig(
        start_radius=2,
        end_radius=14,
        step_size=4,
        calibration=Calibration(pixel_width=2, pixel_height=2, unit="um"),
    )

    result = run_analysis(disk_image, np.array([50, 50]), config)

    np.testing.assert_array_equal(result.profile.radii, [2, 6, 10, 14])
    np.testing.assert_array_equal(result.profile.counts, [1, 1, 1, 0])


def test_run_analysis_3d():
    """Test the analysis of a ball."""
    image = np.zeros((21, 21, 21), dtype=np.uint8)
    draw_ball(image, (10, 10, 10), 3)
    config = ShollConfig(start_radius=1, end_radius=5, step_size=1)

    result = run_analysis(image, np.array([10, 10, 10]), config)

    assert result.profile.is_3d
    np.testing.assert_array_equal(result.profile.counts, [1, 1, 1, 0, 0])


def test_run_analysis_single_slice(disk_image):
    """A stack with a single slice is analysed in 2D."""
    config = ShollConfig(start_radius=1, end_radius=7, step_size=1)

    result = run_analysis(disk_image[np.newaxis], np.array([50, 50, 0]), config)

    assert not result.profile.is_3d
    np.testing.assert_array_equal(result.profile.counts, [1, 1, 1, 1, 1, 0, 0])


def test_run_analysis_export(tmp_path, star_image):
    """The analysed profile is written to a CSV file."""
    config = ShollConfig(
        start_radius=5, end_radius=40, step_size=5, method=ShollMethod.SEMI_LOG
    )
    path = tmp_path / "star.csv"

    result = run_analysis(star_image, np.array([50, 50]), config, export_path=path)

    assert result.export_path == path
    table = pd.read_csv(path)
    assert len(table) == 8


def test_run_analysis_step_too_large(disk_image):
    """A step larger than the sampled range is rejected."""
    config = ShollConfig(start_radius=1, end_radius=7, step_size=10)

    with pytest.raises(InvalidConfigurationError):
        run_analysis(disk_image, np.array([50, 50]), config)


def test_run_analysis_grayscale_requires_threshold():
    """A grayscale image cannot be analysed without a threshold band."""
    image = np.arange(100, dtype=np.uint8).reshape(10, 10)

    with pytest.raises(ValueError):
        run_analysis(image, np.array([5, 5]))
