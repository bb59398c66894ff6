"""Voxels on the surface of a sphere."""

from collections.abc import Iterator

import numpy as np

from shollplex.constants import SHELL_HALF_WIDTH
from shollplex.sampling._bounds import BoundingRegion


def iter_sphere_shell_slices(
    center: np.ndarray,
    radius: int,
    region: BoundingRegion | None = None,
    half_width: float = SHELL_HALF_WIDTH,
) -> Iterator[tuple[int, np.ndarray]]:
    """Iterate over the z-slices of a thin spherical shell.

    A voxel belongs to the shell when its distance to the center
    differs from the radius by less than half_width. Every voxel in the
    box of +/- radius around the center (clipped to the region) is tested,
    so the cost grows with the cube of the radius.

    Parameters
    ----------
    center : np.ndarray
        (x, y, z) center of the sphere.
    radius : int
        The radius of the sphere in voxels.
    region : BoundingRegion | None
        Only voxels inside this region are tested.
        If None, the full box around the center is tested.
    half_width : float
        Half of the shell thickness. Default is 0.5.

    Yields
    ------
    z : int
        The z-slice index.
    coordinates : np.ndarray
        (n_voxels, 3) integer array of (x, y, z) coordinates of the
        shell voxels in this slice.
    """
    center = np.asarray(center, dtype=int)
    if center.shape != (3,):
        raise ValueError("center must be an (x, y, z) coordinate")
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    box_min = center - radius
    box_max = center + radius
    if region is not None:
        box_min = np.maximum(box_min, region.min_bounds)
        box_max = np.minimum(box_max, region.max_bounds)
    if np.any(box_min > box_max):
        return

    # the xy grid is the same for every slice
    yy, xx = np.mgrid[box_min[1] : box_max[1] + 1, box_min[0] : box_max[0] + 1]
    xx = xx.ravel()
    yy = yy.ravel()
    planar_distance_squared = (xx - center[0]) ** 2 + (yy - center[1]) ** 2

    for z in range(box_min[2], box_max[2] + 1):
        distance = np.sqrt(planar_distance_squared + (z - center[2]) ** 2)
        in_shell = np.abs(distance - radius) < half_width
        n_voxels = np.count_nonzero(in_shell)
        coordinates = np.column_stack(
            (xx[in_shell], yy[in_shell], np.full(n_voxels, z, dtype=int))
        )
        yield z, coordinates


def sample_sphere_shell(
    center: np.ndarray,
    radius: int,
    region: BoundingRegion | None = None,
    half_width: float = SHELL_HALF_WIDTH,
) -> np.ndarray:
    """Get the voxels on the surface of a sphere.

    See iter_sphere_shell_slices for the parameters.

    Returns
    -------
    np.ndarray
        (n_voxels, 3) integer array of (x, y, z) coordinates.
    """
    slices = [
        coordinates
        for _, coordinates in iter_sphere_shell_slices(
            center, radius, region=region, half_width=half_width
        )
    ]
    if len(slices) == 0:
        return np.zeros((0, 3), dtype=int)
    return np.concatenate(slices, axis=0)
