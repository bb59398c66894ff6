import numpy as np
import pandas as pd
import pytest

from shollplex.analysis import analyze_profile
from shollplex.constants import ShollMethod
from shollplex.io import (
    analysis_to_table,
    axis_titles,
    export_analysis,
    export_file_name,
    export_profile,
    profile_to_table,
    values_for_mask,
)
from shollplex.profile import IntersectionProfile


@pytest.fixture
def simple_profile(decaying_profile_counts):
    radii, counts = decaying_profile_counts
    return IntersectionProfile(radii=radii, counts=counts)


@pytest.mark.parametrize(
    "method,is_3d,expected",
    [
        (ShollMethod.LINEAR, False, ("2D distance (um)", "N. of Intersections")),
        (
            ShollMethod.NORMALIZED,
            True,
            ("3D distance (um)", "N. Inters./Sphere volume (um^3)"),
        ),
        (
            ShollMethod.SEMI_LOG,
            False,
            ("2D distance (um)", "log(N. Inters./Circle area)"),
        ),
        (
            ShollMethod.LOG_LOG,
            False,
            ("log(2D distance)", "log(N. Inters./Circle area)"),
        ),
    ],
)
def test_axis_titles(method, is_3d, expected):
    """Column names follow the axes of the method."""
    assert axis_titles(method, unit="um", is_3d=is_3d) == expected


def test_profile_to_table(simple_profile):
    """The raw profile has one row per radius."""
    table = profile_to_table(simple_profile)

    assert list(table.columns) == ["2D distance (pixels)", "N. of Intersections"]
    np.testing.assert_array_equal(table.iloc[:, 0], simple_profile.radii)
    np.testing.assert_array_equal(table.iloc[:, 1], simple_profile.counts)


def test_analysis_to_table_with_fit(simple_profile):
    """The fitted values are added when a fit was performed."""
    analysis = analyze_profile(simple_profile, fit_curve=True)

    table = analysis_to_table(analysis)

    assert table.shape == (len(simple_profile), 3)
    assert table.columns[2] == "Fitted N. of Intersections"


def test_export_analysis(tmp_path, simple_profile):
    """Test writing an analysed profile to CSV."""
    analysis = analyze_profile(simple_profile, method=ShollMethod.SEMI_LOG)
    path = tmp_path / "profile.csv"

    written = export_analysis(analysis, path)

    assert written == path
    table = pd.read_csv(path)
    assert list(table.columns) == [
        "2D distance (pixels)",
        "log(N. Inters./Circle area)",
    ]
    np.testing.assert_allclose(table.iloc[:, 1], analysis.y)


def test_export_profile_failure(tmp_path, simple_profile):
    """Failing to write is not an error."""
    path = tmp_path / "missing_directory" / "profile.csv"

    assert export_profile(simple_profile, path) is None
    assert not path.exists()


def test_export_file_name():
    """The table is named after the image and the method."""
    assert export_file_name("cell.tif", ShollMethod.LINEAR) == "cell_Sholl-M1.csv"
    assert export_file_name("cell.tif", ShollMethod.LOG_LOG) == "cell_Sholl-M4.csv"


def test_values_for_mask(simple_profile):
    """The mask shows the fitted values when available."""
    raw = analyze_profile(simple_profile)
    fitted = analyze_profile(simple_profile, fit_curve=True)

    np.testing.assert_array_equal(values_for_mask(raw), raw.y)
    np.testing.assert_array_equal(values_for_mask(fitted), fitted.fitted_y)
