"""Constants and enumerations used throughout the Sholl analysis."""

from enum import Enum

# distance at or below which two sampled points belong to the same group.
# 1.5 gives 8-connectivity in 2D and 26-connectivity in 3D.
ADJACENCY_THRESHOLD = 1.5

# half width of the shell used to sample a sphere
SHELL_HALF_WIDTH = 0.5

# fits on fewer non-zero points than this are not attempted
MIN_FIT_POINTS = 7

# number of evaluations used to locate the critical radius
CRITICAL_SEARCH_STEPS = 1000

MIN_POLYNOMIAL_DEGREE = 4
MAX_POLYNOMIAL_DEGREE = 8

MAX_SAMPLES_PER_RADIUS = 10


class ShollMethod(str, Enum):
    """The Sholl methods.

    LINEAR: number of intersections vs. distance, polynomial fit.
    NORMALIZED: intersections per area (or volume) vs. distance, power law fit.
    SEMI_LOG: log of normalized intersections vs. distance, linear fit.
    LOG_LOG: log of normalized intersections vs. log distance,
        exponential with offset fit.
    """

    LINEAR = "linear"
    NORMALIZED = "normalized"
    SEMI_LOG = "semi_log"
    LOG_LOG = "log_log"


class CombineMode(str, Enum):
    """How the sub-samples taken for one radius are combined."""

    MEAN = "mean"
    MEDIAN = "median"


class Trim(str, Enum):
    """Restrict the analysis to one side of the center.

    ABOVE and BELOW refer to image rows (y grows downwards),
    LEFT and RIGHT to image columns.
    """

    NONE = "none"
    ABOVE = "above"
    BELOW = "below"
    LEFT = "left"
    RIGHT = "right"


class ProfileStatus(str, Enum):
    """Whether a profile was sampled for every radius."""

    COMPLETE = "complete"
    CANCELLED = "cancelled"
