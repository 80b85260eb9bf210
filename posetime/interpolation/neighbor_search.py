"""
Bracketing-sample lookup over time-ordered pose collections.

find_neighbors returns either the exact sample at the query time or the two
adjacent samples (previous, following) with
previous.timestamp < target_time < following.timestamp.

Random-access collections are searched with a keyed lower-bound bisection in
O(log n); forward-only collections (deque, dict views, generators) are
scanned once in O(n).
"""

import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable

from posetime.geometry import TimedPose
from .exceptions import EmptyInputError, InternalInvariantViolation, OutOfRangeError
from .sample_access import SampleView, open_samples

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class Neighbors:
    """Result of a neighbor lookup. For exact hits previous is following."""
    previous: TimedPose
    following: TimedPose
    exact: bool

    @classmethod
    def exact_hit(cls, sample: TimedPose) -> "Neighbors":
        return cls(sample, sample, True)


def _check_range(target_time: float, start_time: float, end_time: float) -> None:
    # Written as a negated closed-interval test so NaN is rejected too
    if not (start_time <= target_time <= end_time):
        raise OutOfRangeError(target_time, start_time, end_time)


def _search_random_access(view: SampleView, target_time: float) -> Neighbors:
    elements = view.elements
    timestamp_of = view.accessor.timestamp_of
    count = len(elements)

    if count == 0:
        raise EmptyInputError()

    _check_range(target_time, timestamp_of(elements[0]), timestamp_of(elements[count - 1]))

    # First element whose timestamp is not less than target_time
    idx = bisect_left(elements, target_time, key=timestamp_of)
    if idx >= count:
        raise InternalInvariantViolation(
            f"Lower bound for t={target_time} ran past the last sample; timestamps are not ordered"
        )

    found = elements[idx]
    found_time = timestamp_of(found)
    if found_time == target_time:
        logger.debug(f"Exact sample hit at index {idx} for t={target_time}")
        return Neighbors.exact_hit(view.accessor.timed_pose_of(found))

    if idx == 0:
        raise InternalInvariantViolation(
            f"Lower bound for t={target_time} is the first sample but does not match it"
        )

    previous = elements[idx - 1]
    previous_time = timestamp_of(previous)
    if not (previous_time < target_time < found_time):
        raise InternalInvariantViolation(
            f"Inconsistent bracket [{previous_time}, {found_time}] for t={target_time}"
        )

    logger.debug(f"Bracket [{idx - 1}, {idx}] = [{previous_time}, {found_time}] for t={target_time}")
    return Neighbors(
        view.accessor.timed_pose_of(previous),
        view.accessor.timed_pose_of(found),
        False
    )


def _search_forward(view: SampleView, target_time: float) -> Neighbors:
    timestamp_of = view.accessor.timestamp_of
    iterator = iter(view.elements)

    element = next(iterator, _MISSING)
    if element is _MISSING:
        raise EmptyInputError()

    start_time = timestamp_of(element)
    if view.last is not None:
        _check_range(target_time, start_time, timestamp_of(view.last))
    elif not (start_time <= target_time):
        raise OutOfRangeError(target_time, start_time, None)

    previous = None
    previous_time = start_time
    steps = 0
    while True:
        element_time = timestamp_of(element)
        if element_time >= target_time:
            break
        previous, previous_time = element, element_time
        element = next(iterator, _MISSING)
        steps += 1
        if element is _MISSING:
            # Every sample precedes target_time: it lies past the last timestamp
            raise OutOfRangeError(target_time, start_time, previous_time)

    if element_time == target_time:
        logger.debug(f"Exact sample hit after {steps} steps for t={target_time}")
        return Neighbors.exact_hit(view.accessor.timed_pose_of(element))

    if previous is None or not (previous_time < target_time < element_time):
        raise InternalInvariantViolation(
            f"Inconsistent bracket [{previous_time}, {element_time}] for t={target_time}"
        )

    logger.debug(f"Bracket [{previous_time}, {element_time}] after {steps} steps for t={target_time}")
    return Neighbors(
        view.accessor.timed_pose_of(previous),
        view.accessor.timed_pose_of(element),
        False
    )


def find_neighbors(samples: Iterable, target_time: float) -> Neighbors:
    """
    Locate the sample at, or the two samples around, target_time.

    Args:
        samples: Time-ordered collection of TimedPose, (timestamp, Pose) pairs,
            or a mapping from timestamp to Pose/TimedPose
        target_time: Query time in seconds

    Returns:
        Neighbors: exact hit, or previous/following samples bracketing target_time

    Raises:
        EmptyInputError: If samples is empty
        OutOfRangeError: If target_time is outside [first, last] timestamp
        InternalInvariantViolation: If samples are not in non-decreasing time order
            and the search lands on an inconsistent bracket
    """
    view = open_samples(samples)
    if view.random_access:
        return _search_random_access(view, target_time)
    return _search_forward(view, target_time)
