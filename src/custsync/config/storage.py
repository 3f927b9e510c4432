"""Where custsync keeps its database.

``DATABASE_URI`` wins outright. Otherwise a SQLite file lives in
``$CUSTSYNC_DATA_DIR`` or, failing that, ``$XDG_DATA_HOME/custsync``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "custsync"
DEFAULT_DB_FILENAME: Final[str] = "custsync.db"
DATA_DIR_ENV: Final[str] = "CUSTSYNC_DATA_DIR"
DATABASE_URI_ENV: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    database_filename: str = DEFAULT_DB_FILENAME

    @classmethod
    def from_env(cls) -> StorageConfig:
        override = os.getenv(DATA_DIR_ENV)
        if override:
            return cls(data_dir=Path(override))
        xdg_home = os.getenv("XDG_DATA_HOME")
        base = Path(xdg_home) if xdg_home else Path.home() / ".local" / "share"
        return cls(data_dir=base / APP_DIR_NAME)

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def database_path(self, *, ensure: bool = True) -> Path:
        """Path of the SQLite file; ``ensure`` creates the data directory."""
        data_dir = self.resolve_data_dir()
        if ensure:
            data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir / self.database_filename

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self.database_path()}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def get_storage_config() -> StorageConfig:
    return StorageConfig.from_env()


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv(DATABASE_URI_ENV)
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    return DatabaseConfig(uri=(storage or StorageConfig.from_env()).database_uri())
