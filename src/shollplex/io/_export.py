"""Tables of Sholl profiles and their export to CSV."""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from shollplex.analysis import ShollAnalysis
from shollplex.constants import ShollMethod
from shollplex.profile import IntersectionProfile

logger = logging.getLogger(__name__)


def axis_titles(
    method: ShollMethod, unit: str = "pixels", is_3d: bool = False
) -> tuple[str, str]:
    """Get the names of the x and y columns of a Sholl method.

    Parameters
    ----------
    method : ShollMethod
        The Sholl method.
    unit : str
        The physical unit of the radii.
    is_3d : bool
        True if the profile was sampled on spheres.

    Returns
    -------
    x_title : str
        Name of the radius column.
    y_title : str
        Name of the value column.
    """
    method = ShollMethod(method)
    distance = "3D distance" if is_3d else "2D distance"
    size = "Sphere volume" if is_3d else "Circle area"

    if method == ShollMethod.LOG_LOG:
        x_title = f"log({distance})"
    else:
        x_title = f"{distance} ({unit})"

    if method == ShollMethod.LINEAR:
        y_title = "N. of Intersections"
    elif method == ShollMethod.NORMALIZED:
        exponent = "3" if is_3d else "2"
        y_title = f"N. Inters./{size} ({unit}^{exponent})"
    else:
        y_title = f"log(N. Inters./{size})"
    return x_title, y_title


def profile_to_table(
    profile: IntersectionProfile, unit: str = "pixels"
) -> pd.DataFrame:
    """Make a table of the raw intersection counts."""
    x_title, y_title = axis_titles(ShollMethod.LINEAR, unit, profile.is_3d)
    return pd.DataFrame({x_title: profile.radii, y_title: profile.counts})


def analysis_to_table(
    analysis: ShollAnalysis, unit: str = "pixels", is_3d: bool = False
) -> pd.DataFrame:
    """Make a table of an analysed profile.

    The table has one row per radius with intersections. The values are
    in the axes of the analysis method; the fitted curve is added as a
    third column when a fit was performed.
    """
    x_title, y_title = axis_titles(analysis.method, unit, is_3d)
    table = pd.DataFrame({x_title: analysis.x, y_title: analysis.y})
    if analysis.fit_performed:
        table[f"Fitted {y_title}"] = analysis.fitted_y
    return table


def _write_table(table: pd.DataFrame, path: str | Path) -> Path | None:
    path = Path(path)
    try:
        table.to_csv(path, index=False)
    except OSError as err:
        logger.error(f"Could not save Sholl table to {path}: {err}")
        return None
    logger.info(f"Saved Sholl table to {path}")
    return path


def export_profile(
    profile: IntersectionProfile, path: str | Path, unit: str = "pixels"
) -> Path | None:
    """Write the raw intersection counts to a CSV file.

    Returns the path of the written file, or None if writing failed.
    """
    return _write_table(profile_to_table(profile, unit), path)


def export_analysis(
    analysis: ShollAnalysis,
    path: str | Path,
    unit: str = "pixels",
    is_3d: bool = False,
) -> Path | None:
    """Write an analysed profile to a CSV file.

    Returns the path of the written file, or None if writing failed.
    """
    return _write_table(analysis_to_table(analysis, unit, is_3d), path)


def export_file_name(image_name: str, method: ShollMethod) -> str:
    """Name of the exported table of an image."""
    stem = Path(image_name).stem
    method_number = list(ShollMethod).index(ShollMethod(method)) + 1
    return f"{stem}_Sholl-M{method_number}.csv"


def values_for_mask(analysis: ShollAnalysis) -> np.ndarray:
    """The values painted on the intersections mask."""
    if analysis.fit_performed:
        return analysis.fitted_y
    return analysis.y
