"""Application configuration helpers."""

from __future__ import annotations

from custsync.common.logging import configure_logging

from .env import ConfigurationError, env_flag
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "StorageConfig",
    "configure_logging",
    "env_flag",
    "get_database_config",
    "get_storage_config",
]
