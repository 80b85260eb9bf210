"""
Geometry primitives for pose interpolation.

Provides:
- Vector3: 3D position/vector value type
- Pose, TimedPose: position + orientation, optionally tagged with a timestamp
- lerp, normalize, quaternion_dot: building blocks for pose interpolation
- point_distance: Euclidean distance between two points of equal dimension

Orientations are numpy-quaternion objects in scalar-first format (w, x, y, z).
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple, Union

import numpy as np
import quaternion
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

NORMALIZE_EPSILON = 1e-10

Quaternion = quaternion.quaternion


def make_quaternion(w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> Quaternion:
    """Build a quaternion from scalar-first components."""
    return quaternion.quaternion(float(w), float(x), float(y), float(z))


IDENTITY_QUATERNION = make_quaternion(1.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Vector3:
    """Point or direction in 3D space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector3":
        if len(values) != 3:
            raise ValueError(f"Vector3 needs exactly 3 components, got {len(values)}")
        return cls(float(values[0]), float(values[1]), float(values[2]))


@dataclass(frozen=True, init=False)
class Pose:
    """
    6-DoF pose: position plus orientation quaternion [w, x, y, z].

    The orientation is stored as a tuple of floats. Reading `orientation`
    builds a new quaternion each time, so changing it in place never
    reaches the pose or anything sharing it.
    """
    position: Vector3
    orientation_wxyz: Tuple[float, float, float, float]

    def __init__(self, position: Optional[Vector3] = None, orientation: Optional[Quaternion] = None):
        if position is None:
            position = Vector3()
        if orientation is None:
            orientation = make_quaternion()
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "orientation_wxyz", (
            float(orientation.w), float(orientation.x), float(orientation.y), float(orientation.z)
        ))

    @property
    def orientation(self) -> Quaternion:
        return make_quaternion(*self.orientation_wxyz)

    @classmethod
    def from_components(cls, position: Sequence[float], orientation: Sequence[float]) -> "Pose":
        """
        Build a pose from plain component lists.

        Args:
            position: [x, y, z]
            orientation: Quaternion components [w, x, y, z] (not normalized here)

        Returns:
            Pose
        """
        if len(orientation) != 4:
            raise ValueError(f"Orientation needs 4 components [w, x, y, z], got {len(orientation)}")
        return cls(Vector3.from_array(position), make_quaternion(*orientation))

    def as_arrays(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Return (position [x, y, z], orientation [w, x, y, z]) as numpy arrays."""
        return self.position.as_array(), np.array(self.orientation_wxyz, dtype=np.float64)


@dataclass(frozen=True)
class TimedPose:
    """Pose tagged with a timestamp in seconds."""
    timestamp: float = 0.0
    pose: Pose = field(default_factory=Pose)


def lerp(a, b, t: float):
    """
    Linear interpolation a*(1-t) + b*t.

    Works for floats, Vector3 and quaternions. No clamping is applied to t.
    """
    return a * (1.0 - t) + b * t


def quaternion_dot(q1: Quaternion, q2: Quaternion) -> float:
    """4-component dot product of two quaternions."""
    return float(q1.w * q2.w + q1.x * q2.x + q1.y * q2.y + q1.z * q2.z)


def normalize(q: Quaternion, eps: float = NORMALIZE_EPSILON) -> Quaternion:
    """
    Return the unit quaternion with the same orientation as q.

    A quaternion whose norm is at or below eps maps to the identity instead
    of being divided by a near-zero norm.
    """
    norm = np.sqrt(quaternion_dot(q, q))
    if norm <= eps:
        logger.debug(f"Quaternion norm {norm:.3e} below {eps:.0e}, falling back to identity")
        return make_quaternion()
    return make_quaternion(q.w / norm, q.x / norm, q.y / norm, q.z / norm)


def point_distance(p1: Union[Vector3, Sequence[float]], p2: Union[Vector3, Sequence[float]]) -> float:
    """
    Euclidean distance between two points of equal dimension.

    Args:
        p1, p2: Vector3 instances or coordinate sequences of any (equal) length

    Returns:
        Distance; 0.0 for two empty points

    Raises:
        ValueError: If the points have different dimensions
    """
    a = p1.as_array() if isinstance(p1, Vector3) else np.asarray(p1, dtype=np.float64)
    b = p2.as_array() if isinstance(p2, Vector3) else np.asarray(p2, dtype=np.float64)

    if a.shape != b.shape:
        raise ValueError(f"Points must have the same dimension ({a.size} vs {b.size})")
    if a.size == 0:
        return 0.0

    return float(np.sqrt(np.sum((a - b) ** 2)))
