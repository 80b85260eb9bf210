"""
Geometry primitives for 6-DoF poses.

Provides:
- Vector3, Pose, TimedPose value types
- Quaternion helpers built on numpy-quaternion
- lerp, normalize, quaternion_dot, point_distance
"""

from .primitives import (
    IDENTITY_QUATERNION,
    NORMALIZE_EPSILON,
    Pose,
    Quaternion,
    TimedPose,
    Vector3,
    lerp,
    make_quaternion,
    normalize,
    point_distance,
    quaternion_dot,
)

__all__ = [
    # Value types
    'Vector3',
    'Quaternion',
    'Pose',
    'TimedPose',
    'IDENTITY_QUATERNION',
    'make_quaternion',
    # Operations
    'lerp',
    'normalize',
    'quaternion_dot',
    'point_distance',
    'NORMALIZE_EPSILON',
]
