"""Configuration package for the volume stats service."""

from .config_manager import StatsConfig, ConfigValidationError

__all__ = ['StatsConfig', 'ConfigValidationError']
