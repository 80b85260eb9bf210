"""
posetime Visualization Module
=============================

Matplotlib plots of pose samples and interpolated queries.
"""

from .trajectory_plotter import create_trajectory_plot
from .plot_styling import setup_matplotlib_backend, PLOT_DPI, FIGURE_SIZE

__all__ = [
    'create_trajectory_plot',
    'setup_matplotlib_backend',
    'PLOT_DPI',
    'FIGURE_SIZE',
]
