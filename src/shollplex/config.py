"""Parameters of a Sholl analysis run."""

import logging

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shollplex.constants import (
    MAX_POLYNOMIAL_DEGREE,
    MAX_SAMPLES_PER_RADIUS,
    MIN_POLYNOMIAL_DEGREE,
    CombineMode,
    ShollMethod,
    Trim,
)

logger = logging.getLogger(__name__)


class Calibration(BaseModel):
    """The physical size of a pixel (or voxel).

    Parameters
    ----------
    pixel_width : float
        Width of a pixel in physical units.
    pixel_height : float
        Height of a pixel in physical units.
    voxel_depth : float
        Spacing between z-slices in physical units. Ignored for 2D images.
    unit : str
        Name of the physical unit.
    """

    model_config = ConfigDict(frozen=True)

    pixel_width: float = Field(default=1.0, gt=0)
    pixel_height: float = Field(default=1.0, gt=0)
    voxel_depth: float = Field(default=1.0, gt=0)
    unit: str = "pixels"

    def voxel_size(self, is_3d: bool) -> float:
        """Return the edge length of an isotropic pixel/voxel of the same size.

        Stacks often have anisotropic voxels with large z-steps, so in 3D
        the size is the cube root of the voxel volume.
        """
        lateral = np.sqrt(self.pixel_width * self.pixel_height)
        if is_3d:
            return float(np.cbrt(lateral * lateral * self.voxel_depth))
        return float(lateral)


class ThresholdBand(BaseModel):
    """The inclusive range of values considered foreground."""

    model_config = ConfigDict(frozen=True)

    lower: float
    upper: float

    @model_validator(mode="after")
    def _check_order(self) -> "ThresholdBand":
        if self.lower > self.upper:
            raise ValueError("lower threshold must be <= upper threshold")
        return self

    @classmethod
    def from_image(
        cls,
        image: np.ndarray,
        lower: float | None = None,
        upper: float | None = None,
    ) -> "ThresholdBand":
        """Derive the threshold band for a segmented image.

        Binary images (a single non-zero value) use that value as both
        bounds. An image without foreground is treated as a binary image
        with the largest value of its dtype as foreground. Grayscale images
        must be thresholded, i.e. both bounds must be given.

        Parameters
        ----------
        image : np.ndarray
            The segmented 2D or 3D image.
        lower : float | None
            Lower bound of the band. Required for grayscale images.
        upper : float | None
            Upper bound of the band. Required for grayscale images.

        Returns
        -------
        ThresholdBand
            The foreground band.
        """
        image = np.asarray(image)
        if image.ndim not in (2, 3):
            raise ValueError(f"Image must be 2D or 3D, got {image.ndim}D")
        if np.issubdtype(image.dtype, np.floating):
            raise ValueError(
                "Floating point images are not supported. "
                "A binary or thresholded integer image is required."
            )

        if lower is not None and upper is not None:
            return cls(lower=lower, upper=upper)

        values = np.unique(image)
        foreground = values[values != 0]
        if len(foreground) == 1:
            value = float(foreground[0])
            return cls(lower=value, upper=value)
        if len(foreground) == 0:
            value = 1.0 if image.dtype == bool else float(np.iinfo(image.dtype).max)
            logger.warning(
                f"Image has no foreground, using the band [{value}, {value}]"
            )
            return cls(lower=value, upper=value)

        raise ValueError(
            "Image is not thresholded. Provide lower and upper threshold "
            "values for grayscale images."
        )


class ShollConfig(BaseModel):
    """Parameters of a Sholl analysis.

    Radii are given in the physical units of the calibration.

    Parameters
    ----------
    start_radius : float
        The first sampled radius.
    end_radius : float
        The largest sampled radius.
    step_size : float
        Distance between consecutive radii. It is never smaller than
        the pixel (voxel) size. Default is 0, which samples every pixel.
    samples_per_radius : int
        Number of circles sampled around each radius (2D only).
        Values are clamped to the range 1 to 10.
    combine_mode : CombineMode
        How the samples of one radius are combined.
    method : ShollMethod
        The Sholl method used to transform and fit the profile.
    polynomial_degree : int
        Degree of the polynomial fitted by the linear method (4 to 8).
    spike_suppression : bool
        Discard single pixel groups lying on the edge of a "stair"
        of foreground pixels (2D only).
    fit_curve : bool
        Fit the profile and compute the morphometric descriptors.
    trim : Trim
        Restrict the analysis to a hemicircle (hemisphere).
    calibration : Calibration
        The physical size of the pixels.
    """

    model_config = ConfigDict(frozen=True)

    start_radius: float = Field(default=10.0, ge=0)
    end_radius: float = Field(default=100.0, ge=0)
    step_size: float = Field(default=0.0, ge=0)
    samples_per_radius: int = 1
    combine_mode: CombineMode = CombineMode.MEAN
    method: ShollMethod = ShollMethod.LINEAR
    polynomial_degree: int = Field(
        default=5, ge=MIN_POLYNOMIAL_DEGREE, le=MAX_POLYNOMIAL_DEGREE
    )
    spike_suppression: bool = True
    fit_curve: bool = False
    trim: Trim = Trim.NONE
    calibration: Calibration = Calibration()

    @field_validator("samples_per_radius", mode="before")
    @classmethod
    def _clamp_samples(cls, value: int) -> int:
        return int(min(max(1, int(value)), MAX_SAMPLES_PER_RADIUS))

    @model_validator(mode="after")
    def _check_radii(self) -> "ShollConfig":
        if self.end_radius <= self.start_radius:
            raise ValueError(
                "Ending radius must be larger than the starting radius: "
                f"got start={self.start_radius}, end={self.end_radius}"
            )
        return self

    def effective_step(self, is_3d: bool) -> float:
        """Return the radius step, never smaller than the voxel size."""
        return max(self.calibration.voxel_size(is_3d), self.step_size)
