"""
Data export utilities for interpolated poses.

Writes pose query results to CSV, flagging which rows are original samples.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, Sequence

import numpy as np

from posetime.geometry import TimedPose

logger = logging.getLogger(__name__)

CSV_HEADER = "Timestamp,X,Y,Z,QW,QX,QY,QZ,Is_Original"


def save_interpolated_poses(
    output_dir: Path,
    poses: Sequence[TimedPose],
    is_original: Sequence[bool],
    timestamp: Optional[str] = None
) -> Path:
    """
    Save queried poses to CSV.

    Args:
        output_dir: Directory to save CSV file (created if missing)
        poses: Poses returned by pose_at, one per query time
        is_original: Per-row flag, True where the query hit an original sample
        timestamp: Optional HHMM timestamp string. If not provided, generates current time.

    Returns:
        Path to the saved CSV file

    Raises:
        ValueError: If inputs are empty or have inconsistent lengths
        RuntimeError: If CSV saving fails
    """
    if len(poses) == 0:
        raise ValueError("Empty poses sequence provided")
    if len(poses) != len(is_original):
        raise ValueError("Poses and is_original must have same length")

    logger.info("Saving interpolated poses to CSV...")

    try:
        if timestamp is None:
            timestamp = datetime.now().strftime("%H%M")
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        data_path = output_dir / f"{timestamp}_poses_{len(poses)}pts.csv"

        rows = []
        for timed_pose, original in zip(poses, is_original):
            position, orientation = timed_pose.pose.as_arrays()
            rows.append([timed_pose.timestamp, *position, *orientation, int(bool(original))])
        data_array = np.array(rows, dtype=np.float64)

        fmt = ['%.9f'] * 8 + ['%d']
        np.savetxt(data_path, data_array, delimiter=',', header=CSV_HEADER, fmt=fmt, comments='')

        logger.info(f"Data saved: {data_path}")
        return data_path

    except Exception as e:
        logger.error(f"Failed to save interpolated poses: {e}")
        raise RuntimeError(f"CSV export failed: {e}") from e
