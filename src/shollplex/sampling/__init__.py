"""Sampling of circles and spheres around the center of an arbor."""

from shollplex.sampling._bounds import BoundingRegion, points_in_aabb
from shollplex.sampling._circle import circle_octant, sample_circle
from shollplex.sampling._sphere import iter_sphere_shell_slices, sample_sphere_shell

__all__ = [
    "BoundingRegion",
    "points_in_aabb",
    "circle_octant",
    "sample_circle",
    "iter_sphere_shell_slices",
    "sample_sphere_shell",
]
