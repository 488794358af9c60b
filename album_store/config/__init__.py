"""
Configuration management for the album store.

This module provides centralized configuration handling with support for
environment variables, .env.local files, and CLI overrides, validated by a
Pydantic schema.
"""

from .env import Env, ConfigError
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["Env", "ConfigError", "ConfigSchema", "ConfigLoader"]
