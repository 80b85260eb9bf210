"""Configuration schemas and YAML loading for pose interpolation."""

from .settings_schemas import InterpolationSettings, OutputSettings, PosetimeConfig
from .settings_manager import SettingsManager

__all__ = ['InterpolationSettings', 'OutputSettings', 'PosetimeConfig', 'SettingsManager']
