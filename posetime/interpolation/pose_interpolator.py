"""
Pose interpolation between two samples.

Provides:
- SLERP for orientations, with shortest-arc correction and a normalized-lerp
  fallback for nearly parallel quaternions
- Linear interpolation for positions
"""

import logging
from typing import Optional

import numpy as np

from posetime.config.settings_schemas import InterpolationSettings
from posetime.geometry import NORMALIZE_EPSILON, Pose, Quaternion, lerp, normalize, quaternion_dot

logger = logging.getLogger(__name__)

SLERP_DOT_THRESHOLD = 0.9995


def slerp(q1: Quaternion,
          q2: Quaternion,
          t: float,
          dot_threshold: float = SLERP_DOT_THRESHOLD,
          eps: float = NORMALIZE_EPSILON) -> Quaternion:
    """
    Perform Spherical Linear Interpolation (SLERP) between two quaternions.

    Inputs are expected to be unit quaternions but are not renormalized.

    Parameters:
    -----------
    q1, q2 : quaternion
        Input quaternions in scalar-first format (w, x, y, z)
    t : float
        Interpolation parameter, t = 0 returns q1, t = 1 returns q2 (or -q2)
    dot_threshold : float
        Above this dot product the quaternions are treated as parallel and
        interpolated linearly, then normalized. Must lie in [0, 1)
    eps : float
        Norm below which the normalized-lerp result becomes the identity

    Returns:
    --------
    quaternion
        Interpolated quaternion
    """
    if not (0.0 <= dot_threshold < 1.0):
        raise ValueError(f"dot_threshold must be in [0, 1), got {dot_threshold}")

    dot_product = quaternion_dot(q1, q2)

    # q and -q are the same rotation; take the shorter arc
    if dot_product < 0.0:
        q2 = -q2
        dot_product = -dot_product

    # 1/sin(theta) blows up as theta -> 0
    if dot_product > dot_threshold:
        return normalize(lerp(q1, q2, t), eps)

    theta = np.arccos(np.clip(dot_product, -1.0, 1.0))
    sin_theta = np.sin(theta)

    ratio1 = np.sin((1.0 - t) * theta) / sin_theta
    ratio2 = np.sin(t * theta) / sin_theta

    return q1 * float(ratio1) + q2 * float(ratio2)


def interpolate_pose(pose1: Pose,
                     pose2: Pose,
                     t: float,
                     settings: Optional[InterpolationSettings] = None) -> Pose:
    """
    Interpolate between two poses.

    Args:
        pose1: Pose at t = 0
        pose2: Pose at t = 1
        t: Interpolation fraction; values outside [0, 1] are clamped
        settings: Optional thresholds, defaults to InterpolationSettings()

    Returns:
        Pose with linearly interpolated position and SLERP orientation
    """
    if settings is None:
        settings = InterpolationSettings()

    t_clamped = min(max(float(t), 0.0), 1.0)
    if t_clamped != t:
        logger.debug(f"Interpolation fraction {t} clamped to {t_clamped}")

    position = lerp(pose1.position, pose2.position, t_clamped)
    orientation = slerp(
        pose1.orientation,
        pose2.orientation,
        t_clamped,
        dot_threshold=settings.slerp_dot_threshold,
        eps=settings.normalize_epsilon
    )
    return Pose(position, orientation)
