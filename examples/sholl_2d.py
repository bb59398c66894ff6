"""Sholl analysis of a synthetic 2D arbor."""

import logging

import numpy as np

from shollplex.config import ShollConfig
from shollplex.constants import ShollMethod
from shollplex.data import generate_arbor_2d
from shollplex.run import run_analysis

# path to save the profile table
csv_path = "arbor_Sholl-M1.csv"

logging.getLogger("shollplex").setLevel(logging.DEBUG)

# generate the arbor
image = generate_arbor_2d(
    shape=(301, 301),
    n_primary_branches=5,
    num_bifurcations=3,
    branch_length=50,
    soma_radius=8,
    dilation_radius=1,
)
center = np.array([150, 150])

config = ShollConfig(
    start_radius=10,
    end_radius=140,
    step_size=2,
    samples_per_radius=3,
    method=ShollMethod.LINEAR,
    polynomial_degree=6,
    fit_curve=True,
)

result = run_analysis(image, center, config, export_path=csv_path)

print(result.profile.summary())
analysis = result.analysis
print(f"Sholl decay: {analysis.decay:.4f} (R^2 = {analysis.decay_r_squared:.3f})")
if analysis.fit_performed:
    descriptors = analysis.descriptors
    print(f"Polynomial fit R^2: {analysis.r_squared:.3f}")
    print(f"Critical radius: {descriptors.critical_radius:.1f}")
    print(f"Critical value: {descriptors.critical_value:.2f}")
    print(f"Mean value: {descriptors.mean_value:.2f}")
    print(f"Ramification index: {descriptors.ramification_index:.2f}")
for note in analysis.notes:
    print(note)
