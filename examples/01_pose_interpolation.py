#!/usr/bin/env python3
"""
posetime Example 1: Pose Interpolation Across Container Shapes
==============================================================

Queries the same five-sample trajectory stored three ways:
- list of TimedPose (random access, bisection)
- deque of TimedPose (forward scan)
- dict keyed by timestamp (ordered map)

Interpolated rows are printed in green, original samples in the default
colour. Results are saved to CSV under data/results/<output_dir>/.

Run from project root:
    python examples/01_pose_interpolation.py [--plot]
"""

import sys
import logging
from collections import deque
from pathlib import Path

# Setup project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from posetime.config.settings_manager import SettingsManager
from posetime.interpolation import is_original_timestamp, pose_at
from posetime.io.data_writer import save_interpolated_poses
from posetime.io.trajectory_loader import load_trajectory

GREEN = "\033[32m"
RESET = "\033[0m"


def print_pose(timed_pose, is_interpolated):
    """Print one query result, green when interpolated."""
    position = timed_pose.pose.position
    q = timed_pose.pose.orientation
    prefix = GREEN if is_interpolated else ""
    suffix = RESET if is_interpolated else ""
    print(f"{prefix}Time: {timed_pose.timestamp}")
    print(f"Position: [{position.x:.4f}, {position.y:.4f}, {position.z:.4f}]")
    print(f"Orientation: [{q.w:.4f}, {q.x:.4f}, {q.y:.4f}, {q.z:.4f}]{suffix}")
    print("-" * 40)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    make_plot = "--plot" in sys.argv[1:]

    print("=" * 60)
    print("posetime Example 1: Pose Interpolation")
    print("=" * 60)

    config_manager = SettingsManager(PROJECT_ROOT)
    config = config_manager.load_config("default_config.yaml")
    trajectory = load_trajectory(PROJECT_ROOT / "data" / "trajectories" / "demo_trajectory.yaml")
    settings = config.interpolation

    containers = {
        "list": list(trajectory.samples),
        "deque": deque(trajectory.samples),
        "dict": trajectory.as_mapping(),
    }

    for label, samples in containers.items():
        print(f"\n========= Testing with {label} =========")
        results = []
        for time in trajectory.query_times:
            result = pose_at(samples, time, settings)
            original = is_original_timestamp(samples, time, settings.original_sample_tolerance)
            print_pose(result, not original)
            results.append((result, original))

    # All containers give identical poses; export the last run (dict)
    if config.output.save_csv:
        output_dir = config_manager.get_output_directory(config)
        save_interpolated_poses(output_dir, [r for r, _ in results], [o for _, o in results])

    if make_plot or config.output.save_plot:
        from posetime.visualization import create_trajectory_plot, setup_matplotlib_backend
        setup_matplotlib_backend(headless=not make_plot)
        create_trajectory_plot(
            trajectory.samples,
            [r for r, _ in results],
            title=trajectory.name,
            output_path=config_manager.get_output_directory(config) / "trajectory.png",
            show=make_plot
        )


if __name__ == "__main__":
    main()
