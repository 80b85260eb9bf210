#!/usr/bin/env python3
"""
posetime Quick Start - Installation Verification
================================================

Run: python quickstart.py

This script verifies your posetime installation by:
1. Checking all required Python packages are installed
2. Importing the posetime modules
3. Loading the demo configuration and trajectory
4. Running one interpolated query

If all checks pass, your installation is ready to use!
"""

import sys
from pathlib import Path

# Project root setup
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))


def print_header(title):
    """Print a formatted section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_check(name, passed, details=None):
    """Print a check result."""
    status = "[OK]" if passed else "[FAIL]"
    print(f"  {status} {name}")
    if details:
        print(f"       {details}")


def check_imports():
    """Check all required Python packages are installed."""
    print_header("Checking Python Dependencies")

    packages = [
        ("numpy", "numpy"),
        ("numpy-quaternion", "quaternion"),
        ("PyYAML", "yaml"),
        ("matplotlib", "matplotlib"),
    ]

    all_ok = True
    for name, import_name in packages:
        try:
            module = __import__(import_name)
            version = getattr(module, "__version__", "unknown")
            print_check(name, True, f"version {version}")
        except ImportError as e:
            print_check(name, False, str(e))
            all_ok = False

    return all_ok


def check_posetime_modules():
    """Check posetime modules can be imported."""
    print_header("Checking posetime Modules")

    modules = [
        ("Settings Manager", "posetime.config.settings_manager", "SettingsManager"),
        ("Geometry Primitives", "posetime.geometry", "Pose"),
        ("Pose Query", "posetime.interpolation", "pose_at"),
        ("Trajectory Loader", "posetime.io.trajectory_loader", "load_trajectory"),
        ("Data Writer", "posetime.io.data_writer", "save_interpolated_poses"),
    ]

    all_ok = True
    for name, module_path, attr_name in modules:
        try:
            module = __import__(module_path, fromlist=[attr_name])
            getattr(module, attr_name)
            print_check(name, True)
        except Exception as e:
            print_check(name, False, str(e))
            all_ok = False

    return all_ok


def run_sample_query():
    """Load the demo config and trajectory and query one pose."""
    print_header("Running Sample Query")

    try:
        from posetime.config.settings_manager import SettingsManager
        from posetime.interpolation import pose_at
        from posetime.io.trajectory_loader import load_trajectory

        config = SettingsManager(PROJECT_ROOT).load_config("default_config.yaml")
        trajectory = load_trajectory(PROJECT_ROOT / "data" / "trajectories" / "demo_trajectory.yaml")
        result = pose_at(trajectory.samples, 0.5, config.interpolation)

        print_check("Configuration loaded", True, config.name)
        print_check("Trajectory loaded", True, f"{len(trajectory.samples)} samples")
        print_check("Query at t=0.5", True, f"position {result.pose.position}")
        return True
    except Exception as e:
        print_check("Sample query", False, str(e))
        return False


def main():
    """Run all verification checks."""
    print()
    print("=" * 60)
    print("  posetime Quick Start - Installation Verification")
    print("=" * 60)

    results = {
        "imports": check_imports(),
        "modules": check_posetime_modules(),
        "sample_query": run_sample_query(),
    }

    print_header("Summary")
    if all(results.values()):
        print("  All checks passed! Next: python examples/01_pose_interpolation.py")
    else:
        print("  Some checks failed. Please review the errors above.")
        print("  Try reinstalling: pip install -e .[test]")


if __name__ == "__main__":
    main()
