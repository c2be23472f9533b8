"""
Configuration module for Nanny.

Uses pydantic-settings for environment variable loading and layered
YAML config files.
"""

from nanny.config.settings import Settings
from nanny.config.sources import ConfigFileError

__all__ = ["ConfigFileError", "Settings"]
