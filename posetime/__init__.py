"""
posetime: time-indexed 6-DoF pose interpolation.

Core entry point is posetime.interpolation.pose_at.
"""

__version__ = "1.0.0"
