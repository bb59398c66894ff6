"""Classification of pixels (voxels) as foreground."""

import numpy as np

from shollplex.config import ThresholdBand


class ThresholdClassifier:
    """Classify pixels of a segmented image against a threshold band.

    Parameters
    ----------
    image : np.ndarray
        The 2D (y, x) or 3D (z, y, x) segmented image.
    band : ThresholdBand
        The inclusive range of foreground values.
    """

    def __init__(self, image: np.ndarray, band: ThresholdBand):
        image = np.asarray(image)
        if image.ndim not in (2, 3):
            raise ValueError(f"Image must be 2D or 3D, got {image.ndim}D")
        self._image = image
        self._band = band

    @property
    def image(self) -> np.ndarray:
        """The classified image."""
        return self._image

    @property
    def band(self) -> ThresholdBand:
        """The foreground band."""
        return self._band

    @property
    def ndim(self) -> int:
        """Number of dimensions of the image."""
        return self._image.ndim

    def _in_image(self, coordinates: np.ndarray) -> np.ndarray:
        extent = np.asarray(self._image.shape[::-1])
        return np.all((coordinates >= 0) & (coordinates < extent), axis=1)

    def values(self, coordinates: np.ndarray) -> np.ndarray:
        """Get the image values at (x, y[, z]) coordinates.

        Coordinates must lie inside the image.
        """
        coordinates = np.asarray(coordinates, dtype=int).reshape(-1, self.ndim)
        # image axes are in reverse order of the coordinate columns
        return self._image[tuple(coordinates[:, ::-1].T)]

    def is_foreground(self, coordinates: np.ndarray) -> np.ndarray:
        """Return a mask of the coordinates whose value lies in the band.

        Coordinates outside of the image are background.

        Parameters
        ----------
        coordinates : np.ndarray
            (n_points, n_dim) array of (x, y[, z]) coordinates.

        Returns
        -------
        np.ndarray
            (n_points,) boolean array.
        """
        coordinates = np.asarray(coordinates, dtype=int).reshape(-1, self.ndim)
        mask = np.zeros(len(coordinates), dtype=bool)
        inside = self._in_image(coordinates)
        values = self.values(coordinates[inside])
        mask[inside] = (values >= self._band.lower) & (values <= self._band.upper)
        return mask

    def foreground_points(self, coordinates: np.ndarray) -> np.ndarray:
        """Keep only the foreground coordinates."""
        coordinates = np.asarray(coordinates, dtype=int).reshape(-1, self.ndim)
        return coordinates[self.is_foreground(coordinates)]
