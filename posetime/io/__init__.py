"""Trajectory file loading and result export."""

from .trajectory_loader import Trajectory, load_trajectory
from .data_writer import save_interpolated_poses

__all__ = ['Trajectory', 'load_trajectory', 'save_interpolated_poses']
