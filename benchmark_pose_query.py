#!/usr/bin/env python3
"""
posetime Pose Query Benchmark
=============================

Times pose_at over a synthetic trajectory held as a list (bisection lookup)
and as a deque (forward scan).

Usage:
    python benchmark_pose_query.py [num_samples]

    num_samples: Number of trajectory samples (default: 10000)

Example:
    python benchmark_pose_query.py 50000
"""

import sys
import time
from collections import deque
from pathlib import Path

# Project setup
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
import quaternion


def build_samples(num_samples: int):
    """Synthetic helix trajectory rotating about Z, one sample per second."""
    from posetime.geometry import Pose, TimedPose, Vector3

    times = np.arange(num_samples, dtype=np.float64)
    angles = 0.1 * times
    samples = []
    for t, angle in zip(times, angles):
        orientation = quaternion.from_rotation_vector([0.0, 0.0, angle])
        position = Vector3(np.cos(angle), np.sin(angle), 0.01 * t)
        samples.append(TimedPose(float(t), Pose(position, orientation)))
    return samples


def benchmark_pose_query(num_samples: int = 10000, num_queries: int = 1000):
    """
    Time pose_at against list and deque storage of the same samples.

    Args:
        num_samples: Number of trajectory samples
        num_queries: Number of random query times

    Returns:
        Dict with timing breakdown
    """
    from posetime.interpolation import pose_at

    timings = {}

    build_start = time.time()
    samples = build_samples(num_samples)
    timings['build'] = time.time() - build_start

    rng = np.random.default_rng(0)
    query_times = rng.uniform(samples[0].timestamp, samples[-1].timestamp, num_queries)

    for label, container in (('list', samples), ('deque', deque(samples))):
        start = time.time()
        for t in query_times:
            pose_at(container, t)
        timings[label] = time.time() - start

    return {
        'timings': timings,
        'num_samples': num_samples,
        'num_queries': num_queries
    }


def print_results(results: dict):
    """Print benchmark results in a nice format."""
    timings = results['timings']

    print()
    print("=" * 70)
    print("POSETIME POSE QUERY BENCHMARK RESULTS")
    print("=" * 70)
    print()
    print(f"Configuration:")
    print(f"  Samples:       {results['num_samples']:,}")
    print(f"  Queries:       {results['num_queries']:,}")
    print()
    print("Timing Breakdown:")
    print("-" * 50)
    print(f"  Sample build:      {timings['build']:>8.3f}s")
    print(f"  list (bisect):     {timings['list']:>8.3f}s")
    print(f"  deque (scan):      {timings['deque']:>8.3f}s")
    print("-" * 50)
    print(f"  Time per query (list):  {timings['list'] / results['num_queries'] * 1e6:.1f}us")
    print(f"  Time per query (deque): {timings['deque'] / results['num_queries'] * 1e6:.1f}us")
    print()
    print("=" * 70)


if __name__ == "__main__":
    num_samples = 10000
    if len(sys.argv) > 1:
        try:
            num_samples = int(sys.argv[1])
        except ValueError:
            print(f"Invalid num_samples: {sys.argv[1]}, using default 10000")

    print(f"Running benchmark with {num_samples} samples...")
    results = benchmark_pose_query(num_samples=num_samples)
    print_results(results)
