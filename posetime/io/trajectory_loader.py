"""
Trajectory file loading.

Reads time-stamped pose samples from YAML or CSV files into TimedPose lists
or timestamp-keyed dictionaries ready for pose_at queries.

YAML layout:
    name: optional trajectory name
    samples:
      - timestamp: 0.0
        position: [x, y, z]
        orientation: [w, x, y, z]
    query_times: [optional, list, of, times]

CSV layout (header required):
    timestamp,x,y,z,qw,qx,qy,qz
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import yaml

from posetime.geometry import Pose, TimedPose

logger = logging.getLogger(__name__)

CSV_COLUMNS = ('timestamp', 'x', 'y', 'z', 'qw', 'qx', 'qy', 'qz')


@dataclass
class Trajectory:
    """Pose samples plus optional query times read from a trajectory file."""
    name: str = "Unnamed Trajectory"
    samples: List[TimedPose] = field(default_factory=list)
    query_times: List[float] = field(default_factory=list)

    def as_mapping(self) -> Dict[float, Pose]:
        """Samples as a dict keyed by timestamp, in sample order."""
        return {sample.timestamp: sample.pose for sample in self.samples}


def _parse_sample(entry: Dict[str, Any], index: int) -> TimedPose:
    try:
        timestamp = float(entry['timestamp'])
        position = entry.get('position', [0.0, 0.0, 0.0])
        orientation = entry.get('orientation', [1.0, 0.0, 0.0, 0.0])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid sample #{index}: {entry!r} ({e})") from e
    return TimedPose(timestamp, Pose.from_components(position, orientation))


def load_yaml_trajectory(path: Path) -> Trajectory:
    """Load a trajectory from a YAML file."""
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict) or 'samples' not in data:
        raise ValueError(f"Trajectory file has no 'samples' list: {path}")

    samples = [_parse_sample(entry, i) for i, entry in enumerate(data['samples'] or [])]
    query_times = [float(t) for t in data.get('query_times', []) or []]

    return Trajectory(
        name=data.get('name', path.stem),
        samples=samples,
        query_times=query_times
    )


def load_csv_trajectory(path: Path) -> Trajectory:
    """Load a trajectory from a CSV file with a timestamp,x,y,z,qw,qx,qy,qz header."""
    with open(path, 'r') as f:
        header = [column.strip().lower() for column in f.readline().split(',')]

    if tuple(header) != CSV_COLUMNS:
        raise ValueError(f"Unexpected CSV header {header}, expected {list(CSV_COLUMNS)}")

    data = np.loadtxt(path, delimiter=',', skiprows=1, dtype=np.float64, ndmin=2)
    samples = [
        TimedPose(float(row[0]), Pose.from_components(row[1:4], row[4:8]))
        for row in data
    ]
    return Trajectory(name=path.stem, samples=samples)


def load_trajectory(path: Union[str, Path]) -> Trajectory:
    """
    Load a trajectory file, dispatching on the file suffix.

    Args:
        path: .yaml/.yml or .csv file

    Returns:
        Trajectory with samples in file order (not re-sorted)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: For unknown suffixes or malformed content
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Trajectory file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in ('.yaml', '.yml'):
        trajectory = load_yaml_trajectory(path)
    elif suffix == '.csv':
        trajectory = load_csv_trajectory(path)
    else:
        raise ValueError(f"Unknown trajectory format: {suffix}")

    logger.info(f"Loaded trajectory '{trajectory.name}' with {len(trajectory.samples)} samples from {path}")
    return trajectory
