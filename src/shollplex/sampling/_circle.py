"""Rasterized circles using Bresenham's circle algorithm."""

import numpy as np

from shollplex.sampling._bounds import BoundingRegion


def circle_octant(radius: int) -> np.ndarray:
    """Get the points of the first octant of a rasterized circle.

    The octant starts at (0, radius) and moves either right or down,
    whichever keeps the accumulated error smallest (ties go right),
    until x passes y. The walk always produces radius + 1 points.

    Parameters
    ----------
    radius : int
        The radius of the circle in pixels.

    Returns
    -------
    np.ndarray
        (radius + 1, 2) array of (x, y) offsets from the center.
    """
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    x, y, err = 0, radius, 0
    octant = []
    while True:
        octant.append((x, y))

        err_right = err + 2 * x + 1
        err_down = err - 2 * y + 1
        if abs(err_down) < abs(err_right):
            y -= 1
            err = err_down
        else:
            x += 1
            err = err_right

        if x > y:
            break

    return np.asarray(octant, dtype=int).reshape(-1, 2)


def _reflect_octant(octant: np.ndarray) -> np.ndarray:
    """Place the eight reflections of an octant in circumference order.

    Each reflection fills one block of len(octant) slots. The last slot
    of every block lies on the axis or diagonal shared with the next block.
    """
    n_slots = len(octant)
    x = octant[:, 0]
    y = octant[:, 1]
    forward = np.arange(n_slots)

    points = np.zeros((8 * n_slots, 2), dtype=int)
    points[forward] = np.column_stack((x, y))
    points[2 * n_slots - forward - 1] = np.column_stack((y, x))
    points[2 * n_slots + forward] = np.column_stack((y, -x))
    points[4 * n_slots - forward - 1] = np.column_stack((x, -y))
    points[4 * n_slots + forward] = np.column_stack((-x, -y))
    points[6 * n_slots - forward - 1] = np.column_stack((-y, -x))
    points[6 * n_slots + forward] = np.column_stack((-y, x))
    points[8 * n_slots - forward - 1] = np.column_stack((-x, y))

    return points


def sample_circle(
    center: np.ndarray,
    radius: int,
    region: BoundingRegion | None = None,
) -> np.ndarray:
    """Get the pixels along the circumference of a circle.

    The circle is rasterized with Bresenham's algorithm and the first
    octant is reflected into the remaining seven. The point closing each
    octant block is dropped as a duplicate of the first point of the next
    block, then points outside of the region are discarded.

    Parameters
    ----------
    center : np.ndarray
        (x, y) center of the circle.
    radius : int
        The radius in pixels. A radius of 0 returns the center and a
        negative radius returns no points.
    region : BoundingRegion | None
        Only points inside this region are returned.
        If None, no points are discarded.

    Returns
    -------
    np.ndarray
        (n_points, 2) integer array of (x, y) pixel coordinates.
    """
    center = np.asarray(center, dtype=int)
    if center.shape != (2,):
        raise ValueError("center must be an (x, y) coordinate")
    radius = int(radius)

    if radius < 0:
        # sub-samples around small radii can fall below the center
        return np.zeros((0, 2), dtype=int)
    if radius == 0:
        points = center[np.newaxis, :]
    else:
        octant = circle_octant(radius)
        reflected = _reflect_octant(octant)
        n_slots = len(octant)
        keep = (np.arange(len(reflected)) + 1) % n_slots != 0
        points = reflected[keep] + center

    if region is not None:
        points = points[region.contains(points)]

    return points
