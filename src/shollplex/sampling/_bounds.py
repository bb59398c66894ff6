"""The region of the image that is sampled during an analysis."""

from dataclasses import dataclass

import numpy as np

from shollplex.constants import Trim


def points_in_aabb(
    coordinates: np.ndarray,
    min_bounds: np.ndarray,
    max_bounds: np.ndarray,
) -> np.ndarray:
    """Create a boolean mask for coordinates within an axis-aligned bounding box.

    Parameters
    ----------
    coordinates : np.ndarray
        (n_coordinates, n_dim) array of point coordinates.
    min_bounds : np.ndarray
        (n_dim,) array with the minimum bounds of the bounding box.
    max_bounds : np.ndarray
        (n_dim,) array with the maximum bounds of the bounding box.

    Returns
    -------
    mask : np.ndarray
        Boolean array with shape (n_coordinates,) where True indicates
        coordinates within the bounding box (inclusive of boundaries).

    """
    if np.any(min_bounds > max_bounds):
        raise ValueError("min_bounds must be <= max_bounds for all dimensions")

    coordinates = np.asarray(coordinates)
    if len(coordinates) == 0:
        return np.zeros((0,), dtype=bool)

    within_min = np.all(coordinates >= min_bounds, axis=1)
    within_max = np.all(coordinates <= max_bounds, axis=1)
    return within_min & within_max


@dataclass(frozen=True)
class BoundingRegion:
    """An inclusive axis-aligned box in (x, y[, z]) pixel coordinates.

    Parameters
    ----------
    min_bounds : np.ndarray
        (n_dim,) array of the smallest valid coordinate along each axis.
    max_bounds : np.ndarray
        (n_dim,) array of the largest valid coordinate along each axis.
    """

    min_bounds: np.ndarray
    max_bounds: np.ndarray

    def __post_init__(self):
        min_bounds = np.asarray(self.min_bounds, dtype=int)
        max_bounds = np.asarray(self.max_bounds, dtype=int)
        if min_bounds.shape != max_bounds.shape:
            raise ValueError("min_bounds and max_bounds must have the same shape")
        if np.any(min_bounds > max_bounds):
            raise ValueError("min_bounds must be <= max_bounds for all dimensions")
        object.__setattr__(self, "min_bounds", min_bounds)
        object.__setattr__(self, "max_bounds", max_bounds)

    @property
    def ndim(self) -> int:
        """Number of dimensions of the region."""
        return len(self.min_bounds)

    @classmethod
    def from_image_shape(
        cls,
        image_shape: tuple[int, ...],
        center: np.ndarray,
        max_radius: int,
        trim: Trim = Trim.NONE,
    ) -> "BoundingRegion":
        """Make the region sampled around a center.

        The box spans max_radius pixels around the center and is clipped
        to the image. It can be restricted to one side of the center to
        perform a hemicircle (hemisphere) analysis.

        Parameters
        ----------
        image_shape : tuple[int, ...]
            Shape of the image, (y, x) or (z, y, x).
        center : np.ndarray
            (x, y) or (x, y, z) center of the analysis.
        max_radius : int
            The largest sampled radius in pixels.
        trim : Trim
            The side of the center to keep. Default keeps everything.

        Returns
        -------
        BoundingRegion
            The sampled region.
        """
        center = np.asarray(center, dtype=int)
        # image shapes are row-major, coordinates are (x, y, z)
        extent = np.asarray(image_shape[::-1], dtype=int) - 1
        if len(center) != len(extent):
            raise ValueError(
                f"center has {len(center)} dimensions, image has {len(extent)}"
            )

        min_bounds = np.maximum(center - max_radius, 0)
        max_bounds = np.minimum(center + max_radius, extent)

        if trim == Trim.ABOVE:
            max_bounds[1] = min(max_bounds[1], center[1])
        elif trim == Trim.BELOW:
            min_bounds[1] = max(min_bounds[1], center[1])
        elif trim == Trim.RIGHT:
            min_bounds[0] = max(min_bounds[0], center[0])
        elif trim == Trim.LEFT:
            max_bounds[0] = min(max_bounds[0], center[0])

        return cls(min_bounds=min_bounds, max_bounds=max_bounds)

    def contains(self, coordinates: np.ndarray) -> np.ndarray:
        """Return a mask of the coordinates inside the region."""
        return points_in_aabb(coordinates, self.min_bounds, self.max_bounds)
