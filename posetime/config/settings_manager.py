"""
Configuration manager for pose interpolation runs.
Handles loading YAML configuration files into PosetimeConfig instances.
"""

import yaml
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Project Imports
from .settings_schemas import (
    PosetimeConfig,
    InterpolationSettings,
    OutputSettings
)

logger = logging.getLogger(__name__)


def _build_section(schema, section_name: str, data: Dict[str, Any]):
    """Build a dataclass section from a YAML mapping, ignoring unknown keys."""
    known = {f.name for f in fields(schema)}
    unknown = set(data) - known
    if unknown:
        logger.warning(f"Ignoring unknown keys in '{section_name}': {sorted(unknown)}")
    return schema(**{key: value for key, value in data.items() if key in known})


class SettingsManager:
    """
    Configuration manager for pose interpolation.
    Handles configuration loading and path resolution.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """Initialize the settings manager."""
        if project_root is None:
            self.project_root = Path(__file__).parent.parent.parent
        else:
            self.project_root = Path(project_root)

        self.configs_dir = self.project_root / "data" / "configs"
        self.config_directory = None  # Directory containing the last loaded config

    def load_config(self, config_path: Union[str, Path]) -> PosetimeConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to configuration YAML file. Relative paths are
                resolved under <project_root>/data/configs.

        Returns:
            PosetimeConfig: Loaded configuration
        """
        config_path = Path(config_path)

        if not config_path.is_absolute():
            config_path = self.configs_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        self.config_directory = config_path.parent
        logger.info(f"Loading config from: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration root must be a mapping: {config_path}")

        config = PosetimeConfig()
        config.name = config_data.get('name', config.name)

        if 'interpolation' in config_data:
            config.interpolation = _build_section(
                InterpolationSettings, 'interpolation', config_data['interpolation'] or {}
            )

        if 'output' in config_data:
            config.output = _build_section(OutputSettings, 'output', config_data['output'] or {})

        logger.info(f"Loaded config: {config.name}")
        logger.debug(f"  Interpolation settings: {config.interpolation}")
        return config

    def get_output_directory(self, config: PosetimeConfig) -> Path:
        """
        Get the output directory path.
        Creates it under data/results/<output_dir>.
        """
        output_dir = config.get_output_directory(self.project_root)
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir
