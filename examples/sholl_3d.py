"""Sholl analysis of a synthetic 3D arbor with anisotropic voxels."""

import numpy as np
from rich.progress import Progress

from shollplex.config import Calibration, ShollConfig
from shollplex.constants import ShollMethod
from shollplex.data import draw_ball, draw_segment
from shollplex.run import run_analysis

# size of the stack (ZYX)
shape = (21, 121, 121)
center = np.array([60, 60, 10])

# soma with straight branches in every slice of the middle of the stack
image = np.zeros(shape, dtype=np.uint8)
for z in range(8, 13):
    for end in [(115, 60), (5, 60), (60, 115), (60, 5), (100, 100)]:
        draw_segment(image[z], (60, 60), end)
draw_ball(image, tuple(center), 6)

config = ShollConfig(
    start_radius=5,
    end_radius=60,
    step_size=5,
    method=ShollMethod.SEMI_LOG,
    fit_curve=True,
    calibration=Calibration(
        pixel_width=0.5, pixel_height=0.5, voxel_depth=2.0, unit="um"
    ),
)

with Progress() as progress:
    task = progress.add_task("Sampling spheres")

    def report_progress(done, total):
        """Update the progress bar."""
        progress.update(task, completed=done, total=total)

    result = run_analysis(image, center, config, report_progress=report_progress)

print(result.profile.summary())
print(f"Sholl decay: {result.analysis.decay:.4f}")
print(f"Semi-log fit R^2: {result.analysis.r_squared:.3f}")
