"""Classification of sampled pixels and counting of intersections."""

from shollplex.counting._classifier import ThresholdClassifier
from shollplex.counting._groups import (
    DisjointSet,
    adjacent_pairs,
    count_groups,
    label_groups,
)
from shollplex.counting._intersections import count_intersections
from shollplex.counting._spikes import (
    NEIGHBOR_OFFSETS,
    STAIR_PATTERNS,
    count_spikes,
    is_stair_neighborhood,
)

__all__ = [
    "ThresholdClassifier",
    "DisjointSet",
    "adjacent_pairs",
    "count_groups",
    "label_groups",
    "count_intersections",
    "NEIGHBOR_OFFSETS",
    "STAIR_PATTERNS",
    "count_spikes",
    "is_stair_neighborhood",
]
