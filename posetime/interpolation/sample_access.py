"""
Uniform read access to time-ordered pose collections.

The neighbor search and interpolation code only ever talk to a
SampleAccessor, so they work the same whether samples are held as:
- a list/tuple of TimedPose (random access)
- a deque or any iterable of TimedPose (forward iteration only)
- a mapping from timestamp to Pose or TimedPose (iterated in key order)
- a sequence of (timestamp, Pose) pairs
"""

import itertools
import logging
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from posetime.geometry import Pose, TimedPose

logger = logging.getLogger(__name__)

_MISSING = object()


class SampleAccessor(ABC):
    """Reads timestamp and pose out of one collection element."""

    @abstractmethod
    def timestamp_of(self, element: Any) -> float:
        pass

    @abstractmethod
    def pose_of(self, element: Any) -> Pose:
        pass

    @abstractmethod
    def timed_pose_of(self, element: Any) -> TimedPose:
        """Return the element as a TimedPose, without copying when it already is one."""
        pass


class TimedPoseAccessor(SampleAccessor):
    """Elements are bare TimedPose values."""

    def timestamp_of(self, element: TimedPose) -> float:
        return element.timestamp

    def pose_of(self, element: TimedPose) -> Pose:
        return element.pose

    def timed_pose_of(self, element: TimedPose) -> TimedPose:
        return element


class KeyedPoseAccessor(SampleAccessor):
    """
    Elements are (timestamp, value) pairs where value is a Pose or TimedPose.

    The key is authoritative for the timestamp.
    """

    def timestamp_of(self, element) -> float:
        return element[0]

    def pose_of(self, element) -> Pose:
        value = element[1]
        return value.pose if isinstance(value, TimedPose) else value

    def timed_pose_of(self, element) -> TimedPose:
        key, value = element
        if isinstance(value, TimedPose):
            if value.timestamp == key:
                return value
            return TimedPose(float(key), value.pose)
        return TimedPose(float(key), value)


TIMED_POSE_ACCESSOR = TimedPoseAccessor()
KEYED_POSE_ACCESSOR = KeyedPoseAccessor()


def accessor_for(element: Any) -> SampleAccessor:
    """
    Pick the accessor matching a single collection element.

    Raises:
        TypeError: If the element is neither a TimedPose nor a (timestamp, pose) pair
    """
    if isinstance(element, TimedPose):
        return TIMED_POSE_ACCESSOR
    if isinstance(element, tuple) and len(element) == 2 and isinstance(element[1], (Pose, TimedPose)):
        return KEYED_POSE_ACCESSOR
    raise TypeError(
        f"Unsupported sample element type {type(element).__name__}; "
        "expected TimedPose or (timestamp, Pose) pair"
    )


@dataclass(frozen=True)
class SampleView:
    """
    Read-only view over a caller-owned sample collection.

    Attributes:
        elements: Iterable over the collection elements in time order
        accessor: Accessor for those elements
        random_access: True if elements supports len() and O(1) indexing
        last: Last element when it can be read without a full scan, else None
    """
    elements: Iterable
    accessor: SampleAccessor
    random_access: bool
    last: Optional[Any] = None


def _last_mapping_item(samples: Mapping) -> Optional[tuple]:
    try:
        key = next(reversed(samples))
    except (TypeError, StopIteration):
        return None
    return key, samples[key]


def open_samples(samples: Iterable) -> SampleView:
    """
    Wrap a sample collection in a SampleView.

    Mappings are searched by bisection when their items view is itself a
    Sequence (e.g. a sorted dict); otherwise they are scanned in iteration
    order. A deque is scanned forward like a linked list.

    Args:
        samples: Time-ordered collection (see module docstring)

    Returns:
        SampleView over the collection; the collection is not copied
    """
    if isinstance(samples, Mapping):
        items = samples.items()
        accessor = accessor_for(next(iter(items))) if samples else KEYED_POSE_ACCESSOR
        if isinstance(items, Sequence):
            return SampleView(items, accessor, random_access=True)
        last = _last_mapping_item(samples) if samples else None
        return SampleView(items, accessor, random_access=False, last=last)

    if isinstance(samples, Sequence) and not isinstance(samples, (str, bytes)):
        if len(samples) == 0:
            return SampleView(samples, TIMED_POSE_ACCESSOR, random_access=True)
        accessor = accessor_for(samples[0])
        if isinstance(samples, deque):
            return SampleView(samples, accessor, random_access=False, last=samples[-1])
        return SampleView(samples, accessor, random_access=True)

    # One-shot iterables: peek the first element to choose the accessor
    iterator = iter(samples)
    first = next(iterator, _MISSING)
    if first is _MISSING:
        return SampleView((), TIMED_POSE_ACCESSOR, random_access=False)
    return SampleView(itertools.chain([first], iterator), accessor_for(first), random_access=False)
