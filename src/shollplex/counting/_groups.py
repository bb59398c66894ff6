"""Counting groups of adjacent points."""

import numpy as np
from scipy.spatial import cKDTree

from shollplex.constants import ADJACENCY_THRESHOLD


class DisjointSet:
    """Union-find over the integers 0 to n_elements - 1.

    Uses path compression and union by size.
    """

    def __init__(self, n_elements: int):
        self._parent = np.arange(n_elements)
        self._size = np.ones(n_elements, dtype=int)
        self.n_sets = n_elements

    def find(self, element: int) -> int:
        """Return the representative of the set containing element."""
        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # point every element on the path directly at the root
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return int(root)

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of two elements.

        Returns True if the elements were in different sets.
        """
        first_root = self.find(first)
        second_root = self.find(second)
        if first_root == second_root:
            return False

        if self._size[first_root] < self._size[second_root]:
            first_root, second_root = second_root, first_root
        self._parent[second_root] = first_root
        self._size[first_root] += self._size[second_root]
        self.n_sets -= 1
        return True

    def labels(self) -> np.ndarray:
        """Get the representative of every element."""
        return np.array([self.find(element) for element in range(len(self._parent))])


def adjacent_pairs(
    points: np.ndarray, threshold: float = ADJACENCY_THRESHOLD
) -> np.ndarray:
    """Find all pairs of points that are at most threshold apart.

    Parameters
    ----------
    points : np.ndarray
        (n_points, n_dim) array of coordinates.
    threshold : float
        The largest distance between adjacent points.

    Returns
    -------
    np.ndarray
        (n_pairs, 2) array of point indices, i < j.
    """
    points = np.asarray(points)
    if len(points) < 2:
        return np.zeros((0, 2), dtype=int)
    tree = cKDTree(points)
    return tree.query_pairs(r=threshold, output_type="ndarray")


def _merge_adjacent(
    points: np.ndarray, threshold: float = ADJACENCY_THRESHOLD
) -> DisjointSet:
    """Merge the points that are at most threshold apart into sets."""
    groups = DisjointSet(len(points))
    for first, second in adjacent_pairs(points, threshold):
        groups.union(first, second)
    return groups


def label_groups(
    points: np.ndarray, threshold: float = ADJACENCY_THRESHOLD
) -> np.ndarray:
    """Assign a group label to each point.

    Two points are in the same group if they are connected by a chain of
    points where consecutive points are at most threshold apart. For a
    threshold of 1.5 this is 8-connectivity in 2D and 26-connectivity
    in 3D.

    Parameters
    ----------
    points : np.ndarray
        (n_points, n_dim) array of coordinates.
    threshold : float
        The largest distance between adjacent points.
        Default is 1.5.

    Returns
    -------
    np.ndarray
        (n_points,) array of labels. Labels are consecutive integers
        starting at 0, numbered in order of first appearance.
    """
    groups = _merge_adjacent(np.asarray(points), threshold)
    _, labels = np.unique(groups.labels(), return_inverse=True)
    if len(labels) == 0:
        return labels

    # renumber by first appearance so that labels do not depend on the roots
    _, first_index = np.unique(labels, return_index=True)
    order = np.argsort(np.argsort(first_index))
    return order[labels]


def count_groups(
    points: np.ndarray,
    threshold: float = ADJACENCY_THRESHOLD,
) -> int:
    """Count the groups of adjacent points.

    See label_groups for the definition of a group.

    Parameters
    ----------
    points : np.ndarray
        (n_points, n_dim) array of coordinates.
    threshold : float
        The largest distance between adjacent points.
        Default is 1.5.

    Returns
    -------
    int
        The number of groups.
    """
    return _merge_adjacent(np.asarray(points), threshold).n_sets
