"""
Trajectory Plotting Module
==========================

Plots original pose samples against interpolated query results: a 3D view
of positions and the quaternion components over time.

Functions:
    create_trajectory_plot: Build (and optionally save) the trajectory figure
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from posetime.geometry import TimedPose
from .plot_styling import FIGURE_SIZE, INTERPOLATED_STYLE, PLOT_DPI, SAMPLE_STYLE

logger = logging.getLogger(__name__)

QUATERNION_LABELS = ('w', 'x', 'y', 'z')


def _stack(poses: Sequence[TimedPose]):
    times = np.array([p.timestamp for p in poses], dtype=np.float64)
    positions = np.array([p.pose.as_arrays()[0] for p in poses], dtype=np.float64).reshape(-1, 3)
    orientations = np.array([p.pose.as_arrays()[1] for p in poses], dtype=np.float64).reshape(-1, 4)
    return times, positions, orientations


def create_trajectory_plot(
    samples: Sequence[TimedPose],
    queried: Sequence[TimedPose],
    title: str = "Pose Trajectory",
    output_path: Optional[Path] = None,
    show: bool = False
) -> plt.Figure:
    """
    Plot original samples and queried poses.

    Args:
        samples: Original samples, in time order
        queried: Results of pose_at queries
        title: Figure title
        output_path: If given, save the figure as PNG here
        show: If True, display the figure interactively

    Returns:
        The matplotlib Figure (caller closes it when not shown)

    Raises:
        ValueError: If samples is empty
    """
    if len(samples) == 0:
        raise ValueError("No samples to plot")

    logger.info(f"Creating trajectory plot with {len(samples)} samples and {len(queried)} queries")

    sample_times, sample_positions, sample_quats = _stack(samples)
    query_times, query_positions, query_quats = _stack(queried)

    fig = plt.figure(figsize=FIGURE_SIZE)
    ax_pos = fig.add_subplot(1, 2, 1, projection='3d')
    ax_pos.plot(*sample_positions.T, linestyle='--', **SAMPLE_STYLE)
    if len(queried):
        ax_pos.scatter(*query_positions.T, **INTERPOLATED_STYLE)
    ax_pos.set_xlabel('X')
    ax_pos.set_ylabel('Y')
    ax_pos.set_zlabel('Z')
    ax_pos.set_title('Position')
    ax_pos.legend()

    ax_quat = fig.add_subplot(1, 2, 2)
    for i, label in enumerate(QUATERNION_LABELS):
        line, = ax_quat.plot(sample_times, sample_quats[:, i], marker='o', label=f'q{label}')
        if len(queried):
            ax_quat.scatter(query_times, query_quats[:, i], color=line.get_color(), marker='x')
    ax_quat.set_xlabel('Time (s)')
    ax_quat.set_ylabel('Quaternion component')
    ax_quat.set_title('Orientation')
    ax_quat.grid(True, alpha=0.3)
    ax_quat.legend()

    fig.suptitle(title)
    fig.tight_layout()

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=PLOT_DPI)
        logger.info(f"Plot saved: {output_path}")

    if show:
        plt.show()

    return fig
