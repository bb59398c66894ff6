"""Suppression of single pixel groups caused by rasterization.

If the edge of a group of foreground pixels lies tangent to a sampling
circle, the circle can cross it several times. Single pixel groups that
sit on the edge of a "stair" of foreground pixels are such false
positives and are discarded.
"""

from collections.abc import Callable

import numpy as np

from shollplex.constants import ADJACENCY_THRESHOLD
from shollplex.counting._groups import label_groups

# (dx, dy) offsets of the eight neighbors of a pixel
NEIGHBOR_OFFSETS = np.array(
    [
        [-1, 1],
        [0, 1],
        [1, 1],
        [-1, 0],
        [1, 0],
        [-1, -1],
        [0, -1],
        [1, -1],
    ]
)

# each stair is (indices that must be foreground, indices that must be background)
# into NEIGHBOR_OFFSETS, one per diagonal orientation
STAIR_PATTERNS = (
    ((0, 1, 3), (4, 6, 7)),
    ((1, 2, 4), (3, 5, 6)),
    ((4, 6, 7), (0, 1, 3)),
    ((3, 5, 6), (1, 2, 4)),
)


def is_stair_neighborhood(neighbors: np.ndarray) -> np.ndarray:
    """Test if pixel neighborhoods match one of the stair patterns.

    Parameters
    ----------
    neighbors : np.ndarray
        (n_pixels, 8) boolean array with the foreground state of the
        neighbors of each pixel, ordered as NEIGHBOR_OFFSETS.

    Returns
    -------
    np.ndarray
        (n_pixels,) boolean array. True where a stair pattern matches.
    """
    neighbors = np.asarray(neighbors, dtype=bool).reshape(-1, 8)
    matches = np.zeros(len(neighbors), dtype=bool)
    for foreground, background in STAIR_PATTERNS:
        matches |= np.all(neighbors[:, foreground], axis=1) & ~np.any(
            neighbors[:, background], axis=1
        )
    return matches


def count_spikes(
    points: np.ndarray,
    is_foreground: Callable[[np.ndarray], np.ndarray],
    labels: np.ndarray | None = None,
    threshold: float = ADJACENCY_THRESHOLD,
) -> int:
    """Count the single pixel groups that lie on the edge of a stair.

    Parameters
    ----------
    points : np.ndarray
        (n_points, 2) array of (x, y) foreground coordinates.
    is_foreground : Callable[[np.ndarray], np.ndarray]
        Returns the foreground mask of an (n, 2) array of coordinates.
    labels : np.ndarray | None
        Group label of every point. If None, the groups are computed
        with label_groups.
    threshold : float
        The largest distance between adjacent points.
        Only used when labels is None.

    Returns
    -------
    int
        The number of spikes.
    """
    points = np.asarray(points, dtype=int)
    if points.ndim != 2 or (len(points) > 0 and points.shape[1] != 2):
        raise ValueError("Spike suppression is only defined for 2D points")
    if len(points) == 0:
        return 0

    if labels is None:
        labels = label_groups(points, threshold)

    _, inverse, group_sizes = np.unique(
        labels, return_inverse=True, return_counts=True
    )
    singletons = points[group_sizes[inverse] == 1]
    if len(singletons) == 0:
        return 0

    neighbor_coordinates = singletons[:, np.newaxis, :] + NEIGHBOR_OFFSETS
    neighbors = is_foreground(neighbor_coordinates.reshape(-1, 2)).reshape(-1, 8)
    return int(np.count_nonzero(is_stair_neighborhood(neighbors)))
