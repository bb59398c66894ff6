"""Drawing simple foreground shapes as example data."""

import numpy as np
from skimage.draw import disk, ellipsoid, line


def draw_disk(
    image: np.ndarray,
    center: tuple[int, int],
    radius: float,
    value: int = 255,
) -> np.ndarray:
    """
    Add a filled disk to an existing 2D image.

    Parameters
    ----------
    image : ndarray
        2D image (y, x) that will be modified in place.
    center : tuple of int
        (x, y) center of the disk.
    radius : float
        Radius of the disk. Pixels closer than radius + 0.5 to the
        center are filled.
    value : int
        The value of the disk pixels. Default is 255.

    Returns
    -------
    image : ndarray
        The input image with the disk added.
    """
    rr, cc = disk((center[1], center[0]), radius + 0.5, shape=image.shape)
    image[rr, cc] = value
    return image


def draw_ball(
    image: np.ndarray,
    center: tuple[int, int, int],
    radius: int,
    value: int = 255,
) -> np.ndarray:
    """
    Add a filled ball to an existing 3D image.

    Parameters
    ----------
    image : ndarray
        3D image (z, y, x) that will be modified in place.
    center : tuple of int
        (x, y, z) center of the ball.
    radius : int
        Radius of the ball in voxels.
    value : int
        The value of the ball voxels. Default is 255.

    Returns
    -------
    image : ndarray
        The input image with the ball added.
    """
    ball = ellipsoid(radius, radius, radius)
    # ellipsoid pads the ball with one voxel on each side
    ball = ball[1:-1, 1:-1, 1:-1]
    offsets = np.argwhere(ball) - radius
    voxels = offsets + np.array([center[2], center[1], center[0]])

    inside = np.all((voxels >= 0) & (voxels < np.asarray(image.shape)), axis=1)
    voxels = voxels[inside]
    image[voxels[:, 0], voxels[:, 1], voxels[:, 2]] = value
    return image


def draw_segment(
    image: np.ndarray,
    start: tuple[int, int],
    end: tuple[int, int],
    value: int = 255,
) -> np.ndarray:
    """Add a one pixel wide segment from start to end, both (x, y)."""
    rr, cc = line(start[1], start[0], end[1], end[0])
    inside = (rr >= 0) & (rr < image.shape[0]) & (cc >= 0) & (cc < image.shape[1])
    image[rr[inside], cc[inside]] = value
    return image


def draw_star_arbor(
    shape: tuple[int, int] = (101, 101),
    center: tuple[int, int] = (50, 50),
    n_branches: int = 4,
    branch_length: int = 40,
    soma_radius: int = 3,
    value: int = 255,
) -> np.ndarray:
    """
    Create a 2D image of straight branches radiating from a soma.

    The first branch points along +x and the others are evenly spaced
    around the center.

    Parameters
    ----------
    shape : tuple[int, int]
        Shape (y, x) of the image.
    center : tuple[int, int]
        (x, y) center of the soma.
    n_branches : int
        Number of primary branches.
    branch_length : int
        Length of each branch from the center.
    soma_radius : int
        Radius of the soma disk.
    value : int
        The foreground value. Default is 255.

    Returns
    -------
    np.ndarray
        A uint8 image with the star arbor.
    """
    image = np.zeros(shape, dtype=np.uint8)
    draw_disk(image, center, soma_radius, value=value)
    for angle in np.linspace(0, 2 * np.pi, n_branches, endpoint=False):
        end = (
            int(round(center[0] + branch_length * np.cos(angle))),
            int(round(center[1] + branch_length * np.sin(angle))),
        )
        draw_segment(image, center, end, value=value)
    return image
