"""Errors raised by pose lookup and interpolation."""

from typing import Optional


class PoseInterpolationError(Exception):
    """Base class for pose interpolation errors."""


class EmptyInputError(PoseInterpolationError, ValueError):
    """The sample collection holds no poses."""

    def __init__(self, message: str = "Pose sequence is empty"):
        super().__init__(message)


class OutOfRangeError(PoseInterpolationError, ValueError):
    """The query time lies outside [first timestamp, last timestamp]."""

    def __init__(self, target_time: float, start_time: float, end_time: Optional[float]):
        self.target_time = target_time
        self.start_time = start_time
        self.end_time = end_time
        end = "?" if end_time is None else f"{end_time}"
        super().__init__(
            f"Target time {target_time} is outside the range of pose timestamps [{start_time}, {end}]"
        )


class InternalInvariantViolation(PoseInterpolationError, RuntimeError):
    """
    Neighbor search produced a bracket inconsistent with the range check.

    Only raised when the caller's samples are not in non-decreasing timestamp
    order. This is a programming error and should not be caught and ignored.
    """
