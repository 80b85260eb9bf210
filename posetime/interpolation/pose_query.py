"""
Pose-at-time queries over time-ordered pose samples.

Provides:
- pose_at: pose at a single query time (exact sample or interpolated)
- interpolate_trajectory: pose_at over many query times
- create_pose_interpolator: reusable interpolator over a snapshot of samples
- is_original_timestamp: tolerance-based check used for reporting only
"""

import logging
from collections.abc import Mapping
from typing import Callable, Iterable, List, Optional, Union

import numpy as np

from posetime.config.settings_schemas import InterpolationSettings
from posetime.geometry import TimedPose
from .neighbor_search import find_neighbors
from .pose_interpolator import interpolate_pose
from .sample_access import open_samples

logger = logging.getLogger(__name__)


def pose_at(samples: Iterable,
            target_time: float,
            settings: Optional[InterpolationSettings] = None) -> TimedPose:
    """
    Return the pose at target_time.

    If target_time equals a sample timestamp exactly (float equality), that
    sample is returned unmodified. Otherwise the two bracketing samples are
    interpolated: linearly for position, SLERP for orientation.

    Args:
        samples: Time-ordered collection of TimedPose, (timestamp, Pose) pairs,
            or a mapping from timestamp to Pose/TimedPose. Only read.
        target_time: Query time in seconds, within [first, last] timestamp
        settings: Optional thresholds, defaults to InterpolationSettings()

    Returns:
        TimedPose stamped with target_time (or the exact/earlier sample)

    Raises:
        EmptyInputError: If samples is empty
        OutOfRangeError: If target_time is outside the sampled time span
        InternalInvariantViolation: If samples are not time ordered
    """
    if settings is None:
        settings = InterpolationSettings()

    neighbors = find_neighbors(samples, target_time)
    if neighbors.exact:
        return neighbors.previous

    previous, following = neighbors.previous, neighbors.following
    time_gap = following.timestamp - previous.timestamp
    if time_gap < settings.min_time_gap:
        logger.warning(
            f"Samples at {previous.timestamp} and {following.timestamp} are closer than "
            f"{settings.min_time_gap}s, returning the earlier sample for t={target_time}"
        )
        return previous

    fraction = (target_time - previous.timestamp) / time_gap
    pose = interpolate_pose(previous.pose, following.pose, fraction, settings)
    return TimedPose(float(target_time), pose)


def interpolate_trajectory(samples: Iterable,
                           query_times: Iterable[float],
                           settings: Optional[InterpolationSettings] = None) -> List[TimedPose]:
    """
    Query pose_at for every time in query_times.

    Samples are snapshotted once so one-shot iterables can be queried
    repeatedly.
    """
    interpolator = create_pose_interpolator(samples, settings)
    return [interpolator(t) for t in query_times]


def create_pose_interpolator(samples: Iterable,
                             settings: Optional[InterpolationSettings] = None) -> Callable:
    """
    Create a pose interpolator over a snapshot of samples.

    The samples are copied into a list of TimedPose so later queries use
    bisection and do not depend on the caller's collection.

    Parameters:
    -----------
    samples : iterable
        Time-ordered collection accepted by pose_at
    settings : InterpolationSettings, optional
        Thresholds applied to every query

    Returns:
    --------
    function
        Interpolation function that takes time(s) and returns a TimedPose,
        or a list of TimedPose for array input
    """
    view = open_samples(samples)
    snapshot = [view.accessor.timed_pose_of(element) for element in view.elements]
    logger.debug(f"Pose interpolator created over {len(snapshot)} samples")

    def interpolator(t: Union[float, np.ndarray]) -> Union[TimedPose, List[TimedPose]]:
        """
        Return the pose at time t.

        Parameters:
        -----------
        t : float or array-like
            Time(s) in seconds

        Returns:
        --------
        TimedPose or list of TimedPose
        """
        if np.isscalar(t):
            return pose_at(snapshot, float(t), settings)
        return [pose_at(snapshot, float(ti), settings) for ti in t]

    return interpolator


def is_original_timestamp(samples: Iterable, time: float, tolerance: float = 1e-9) -> bool:
    """
    Check whether time matches a sample timestamp within tolerance.

    Reporting helper only: pose_at itself always uses exact equality.

    The comparison is inclusive (|ts - time| <= tolerance), so a difference
    of exactly `tolerance` still counts, and it applies to mappings as well
    as sequences. A strict `< tolerance` check with exact key lookup on
    mappings would report fewer matches. A tolerance of 0 requires an exact
    match (key membership for mappings).
    """
    if tolerance <= 0.0 and isinstance(samples, Mapping):
        return time in samples

    view = open_samples(samples)
    timestamp_of = view.accessor.timestamp_of
    return any(abs(timestamp_of(element) - time) <= tolerance for element in view.elements)
