"""Tables, files and images made from Sholl profiles."""

from shollplex.io._export import (
    analysis_to_table,
    axis_titles,
    export_analysis,
    export_file_name,
    export_profile,
    profile_to_table,
    values_for_mask,
)
from shollplex.io._mask import make_intersections_mask

__all__ = [
    "analysis_to_table",
    "axis_titles",
    "export_analysis",
    "export_file_name",
    "export_profile",
    "profile_to_table",
    "values_for_mask",
    "make_intersections_mask",
]
