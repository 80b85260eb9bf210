"""
Interpolation module for posetime.

Provides interpolation utilities for:
- Pose-at-time queries over lists, deques, iterables and timestamp-keyed mappings
- Orientations (quaternion SLERP with shortest-arc correction)
- Bracketing-sample lookup
"""

from .exceptions import (
    PoseInterpolationError,
    EmptyInputError,
    OutOfRangeError,
    InternalInvariantViolation
)

from .pose_interpolator import slerp, interpolate_pose

from .neighbor_search import Neighbors, find_neighbors

from .sample_access import (
    SampleAccessor,
    TimedPoseAccessor,
    KeyedPoseAccessor,
    SampleView,
    open_samples
)

from .pose_query import (
    pose_at,
    interpolate_trajectory,
    create_pose_interpolator,
    is_original_timestamp
)

__all__ = [
    # Queries
    'pose_at',
    'interpolate_trajectory',
    'create_pose_interpolator',
    'is_original_timestamp',
    # Pose/orientation interpolation
    'slerp',
    'interpolate_pose',
    # Lookup
    'Neighbors',
    'find_neighbors',
    'SampleAccessor',
    'TimedPoseAccessor',
    'KeyedPoseAccessor',
    'SampleView',
    'open_samples',
    # Errors
    'PoseInterpolationError',
    'EmptyInputError',
    'OutOfRangeError',
    'InternalInvariantViolation',
]
