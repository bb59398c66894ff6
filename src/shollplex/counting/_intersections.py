"""Counting the arbor segments crossing a sampled circle or sphere."""

import numpy as np

from shollplex.constants import ADJACENCY_THRESHOLD
from shollplex.counting._classifier import ThresholdClassifier
from shollplex.counting._groups import _merge_adjacent
from shollplex.counting._spikes import count_spikes


def count_intersections(
    points: np.ndarray,
    classifier: ThresholdClassifier,
    spike_suppression: bool = False,
    threshold: float = ADJACENCY_THRESHOLD,
    points_are_foreground: bool = False,
) -> int:
    """Count the groups of foreground pixels among sampled coordinates.

    Parameters
    ----------
    points : np.ndarray
        (n_points, n_dim) array of sampled (x, y[, z]) coordinates.
    classifier : ThresholdClassifier
        Classifies the sampled pixels as foreground.
    spike_suppression : bool
        Discard single pixel groups on the edge of a stair of foreground
        pixels. Only applied to 2D points.
    threshold : float
        The largest distance between adjacent points.
        Default is 1.5.
    points_are_foreground : bool
        Set to True if points were already classified as foreground.

    Returns
    -------
    int
        The number of intersections.
    """
    points = np.asarray(points, dtype=int)
    if not points_are_foreground:
        points = classifier.foreground_points(points)
    if len(points) == 0:
        return 0

    groups = _merge_adjacent(points, threshold)
    n_groups = groups.n_sets

    if spike_suppression and points.shape[1] == 2:
        n_groups -= count_spikes(
            points, classifier.is_foreground, labels=groups.labels()
        )

    return n_groups
