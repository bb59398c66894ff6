"""Creating bifurcating arbors as example data."""

import numpy as np
from scipy.ndimage import binary_dilation
from skimage.morphology import disk

from shollplex.data._shapes import draw_disk, draw_segment


def draw_branch(
    image,
    start,
    length,
    angle,
    level,
    max_levels,
    left_angle=30,
    right_angle=30,
    length_ratio=0.7,
):
    """
    Adds a branch and its daughters to a bifurcating arbor.

    Parameters
    ----------
    image : np.ndarray
        The 2D image (y, x) where the arbor is drawn.
    start : tuple[int, int]
        The (x, y) starting position of the branch.
    length : int
        The length of the current branch.
    angle : float
        The angle (in degrees, from the +x axis) at which the branch grows.
    level : int
        The current recursion depth (bifurcation level).
    max_levels : int
        The maximum number of bifurcation levels.
    left_angle : float, optional
        The angle offset for left branches, by default 30 degrees.
    right_angle : float, optional
        The angle offset for right branches, by default 30 degrees.
    length_ratio : float, optional
        The ratio by which branch length decreases in each bifurcation, by default 0.7.

    Returns
    -------
    None
        Modifies the input image in place.
    """
    if level > max_levels or length <= 0:
        return

    x_end = start[0] + int(length * np.cos(np.radians(angle)))
    y_end = start[1] + int(length * np.sin(np.radians(angle)))

    # Clip endpoints to stay within the image bounds
    x_end = int(np.clip(x_end, 0, image.shape[1] - 1))
    y_end = int(np.clip(y_end, 0, image.shape[0] - 1))

    draw_segment(image, start, (x_end, y_end), value=1)

    new_start = (x_end, y_end)
    for offset in (-left_angle, right_angle):
        draw_branch(
            image,
            new_start,
            int(length * length_ratio),
            angle + offset,
            level + 1,
            max_levels,
            left_angle,
            right_angle,
            length_ratio,
        )


def generate_arbor_2d(
    shape=(201, 201),
    n_primary_branches=4,
    num_bifurcations=2,
    branch_length=30,
    soma_radius=5,
    left_angle=30,
    right_angle=30,
    length_ratio=0.7,
    dilation_radius=0,
):
    """
    Generate a 2D arbor of bifurcating branches around a central soma.

    Parameters
    ----------
    shape : tuple[int, int], optional
        The dimensions (y, x) of the image, by default (201, 201).
    n_primary_branches : int, optional
        Number of branches leaving the soma, by default 4.
    num_bifurcations : int, optional
        The number of bifurcation levels, by default 2.
    branch_length : int, optional
        The length of the primary branches, by default 30.
    soma_radius : int, optional
        The radius of the soma, by default 5.
    left_angle : float, optional
        The angle offset for left branches, by default 30 degrees.
    right_angle : float, optional
        The angle offset for right branches, by default 30 degrees.
    length_ratio : float, optional
        The ratio by which branch length decreases per bifurcation, by default 0.7.
    dilation_radius : int, optional
        Radius of the disk used to thicken the branches, by default 0.

    Returns
    -------
    np.ndarray
        A binary uint8 image (0 and 255) with the arbor centered in the image.
    """
    image = np.zeros(shape, dtype=np.uint8)
    center = (shape[1] // 2, shape[0] // 2)
    draw_disk(image, center, soma_radius, value=1)

    for angle in np.linspace(0, 360, n_primary_branches, endpoint=False):
        start = (
            center[0] + int(soma_radius * np.cos(np.radians(angle))),
            center[1] + int(soma_radius * np.sin(np.radians(angle))),
        )
        draw_branch(
            image,
            start,
            branch_length,
            angle=angle,
            level=0,
            max_levels=num_bifurcations,
            left_angle=left_angle,
            right_angle=right_angle,
            length_ratio=length_ratio,
        )

    if dilation_radius > 0:
        image = binary_dilation(image, structure=disk(dilation_radius))

    return image.astype(np.uint8) * 255
