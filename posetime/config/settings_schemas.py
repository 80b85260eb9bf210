"""
Configuration schemas for pose interpolation.
Tunable numeric thresholds and output options for the interpolation engine.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


def _as_float(name: str, value: Any) -> float:
    # YAML reads exponents without a decimal point (1e-6) as strings
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"'{name}' must be a number, got {value!r}") from e


def _as_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"'{name}' must be true or false, got {value!r}")


@dataclass
class InterpolationSettings:
    """Numeric thresholds used by the interpolation engine."""
    slerp_dot_threshold: float = 0.9995  # Above this, SLERP falls back to normalized lerp
    normalize_epsilon: float = 1e-10
    min_time_gap: float = 1e-9  # Bracketing samples closer than this return the earlier sample
    original_sample_tolerance: float = 1e-9  # Display only, never used for exact-match lookup

    def __post_init__(self):
        self.slerp_dot_threshold = _as_float('slerp_dot_threshold', self.slerp_dot_threshold)
        self.normalize_epsilon = _as_float('normalize_epsilon', self.normalize_epsilon)
        self.min_time_gap = _as_float('min_time_gap', self.min_time_gap)
        self.original_sample_tolerance = _as_float('original_sample_tolerance',
                                                   self.original_sample_tolerance)

        # At 1.0 the acos branch sees sin(theta) == 0
        if not (0.0 <= self.slerp_dot_threshold < 1.0):
            raise ValueError(
                f"slerp_dot_threshold must be in [0, 1), got {self.slerp_dot_threshold}"
            )
        for name in ('normalize_epsilon', 'min_time_gap', 'original_sample_tolerance'):
            value = getattr(self, name)
            if not value >= 0.0:
                raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass
class OutputSettings:
    """Where and what to write for batch queries."""
    output_dir: str = "interpolation_results"
    save_csv: bool = True
    save_plot: bool = False

    def __post_init__(self):
        self.output_dir = str(self.output_dir)
        self.save_csv = _as_bool('save_csv', self.save_csv)
        self.save_plot = _as_bool('save_plot', self.save_plot)


@dataclass
class PosetimeConfig:
    """
    Complete configuration for a pose interpolation run.
    """
    name: str = "Unnamed Trajectory"

    interpolation: InterpolationSettings = field(default_factory=InterpolationSettings)
    output: OutputSettings = field(default_factory=OutputSettings)

    def get_output_directory(self, project_root: Path) -> Path:
        """Get the full output directory path under data/results/."""
        return project_root / "data" / "results" / self.output.output_dir
