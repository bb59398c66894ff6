"""Paint the Sholl profile of an arbor on its pixels."""

import numpy as np

from shollplex.config import ShollConfig, ThresholdBand
from shollplex.counting import ThresholdClassifier
from shollplex.data import generate_arbor_2d
from shollplex.io import make_intersections_mask, values_for_mask
from shollplex.run import run_analysis

image = generate_arbor_2d(shape=(201, 201), num_bifurcations=3, dilation_radius=1)
center = np.array([100, 100])
config = ShollConfig(start_radius=5, end_radius=95, step_size=5, fit_curve=True)

result = run_analysis(image, center, config)

classifier = ThresholdClassifier(image, ThresholdBand.from_image(image))
mask = make_intersections_mask(
    classifier,
    center,
    values_for_mask(result.analysis),
    start_radius=result.analysis.x[0],
    end_radius=result.analysis.x[-1],
    region=result.region,
)
print(f"Painted {np.count_nonzero(mask)} pixels, max value {mask.max():.2f}")
