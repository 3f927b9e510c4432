"""Environment variable loaders and configuration errors."""

from __future__ import annotations

import os


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


def env_flag(name: str, *, default: bool = False) -> bool:
    """Interpret an environment variable as a boolean switch."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")
