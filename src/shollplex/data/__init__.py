"""Synthetic arbors for examples and tests."""

from shollplex.data._arbor import draw_branch, generate_arbor_2d
from shollplex.data._shapes import draw_ball, draw_disk, draw_segment, draw_star_arbor

__all__ = [
    "draw_branch",
    "generate_arbor_2d",
    "draw_ball",
    "draw_disk",
    "draw_segment",
    "draw_star_arbor",
]
