"""Shared fixtures: the five-sample demo trajectory in several container shapes."""

from collections import deque

import pytest

from posetime.geometry import Pose, TimedPose, Vector3, make_quaternion

DEMO_QUERY_TIMES = [0.0, 0.5, 1.0, 1.75, 2.5, 3.5, 4.0]


def _demo_samples() -> list[TimedPose]:
    return [
        TimedPose(0.0, Pose(Vector3(0.0, 0.0, 0.0), make_quaternion(1.0, 0.0, 0.0, 0.0))),
        TimedPose(1.0, Pose(Vector3(1.0, 0.0, 0.0), make_quaternion(0.7071, 0.0, 0.7071, 0.0))),
        TimedPose(2.0, Pose(Vector3(1.0, 1.0, 0.0), make_quaternion(0.0, 0.0, 1.0, 0.0))),
        TimedPose(3.0, Pose(Vector3(0.0, 1.0, 0.0), make_quaternion(0.0, 0.0, 0.7071, 0.7071))),
        TimedPose(4.0, Pose(Vector3(0.0, 0.0, 1.0), make_quaternion(0.0, 0.0, 0.0, 1.0))),
    ]


@pytest.fixture
def demo_samples() -> list[TimedPose]:
    return _demo_samples()


@pytest.fixture
def demo_deque(demo_samples: list[TimedPose]) -> deque:
    return deque(demo_samples)


@pytest.fixture
def demo_mapping(demo_samples: list[TimedPose]) -> dict:
    return {sample.timestamp: sample.pose for sample in demo_samples}


@pytest.fixture
def demo_query_times() -> list[float]:
    return list(DEMO_QUERY_TIMES)
