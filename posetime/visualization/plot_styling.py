"""
Plot Styling and Configuration Module
====================================

Shared styling constants and matplotlib backend configuration for
trajectory plots.

Constants:
    PLOT_DPI: High DPI for saved plots
    FIGURE_SIZE: Consistent figure dimensions
    SAMPLE_STYLE, INTERPOLATED_STYLE: Marker styles for the two point kinds

Functions:
    setup_matplotlib_backend: Configure matplotlib backend for headless runs
"""

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

PLOT_DPI = 150
FIGURE_SIZE = (12, 8)

SAMPLE_STYLE: Dict[str, Any] = {'color': 'tab:blue', 'marker': 'o', 'label': 'Original samples'}
INTERPOLATED_STYLE: Dict[str, Any] = {'color': 'tab:green', 'marker': 'x', 'label': 'Interpolated'}


def setup_matplotlib_backend(headless: bool) -> None:
    """
    Configure matplotlib backend.

    Uses the non-interactive 'Agg' backend when headless is True so plots can
    be saved on servers without a display.

    Args:
        headless: True to force the 'Agg' backend
    """
    if headless:
        logger.info("Configuring matplotlib for headless use (Agg backend)")
        import matplotlib
        matplotlib.use('Agg')
    else:
        logger.debug("Using default matplotlib backend for interactive plotting")
