"""Pydantic configuration models for objectgraph."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class StorageConfig(BaseModel):
    """Storage backend configuration."""

    backend: Literal["memory", "local", "session"] = "memory"
    key: str = Field(default="objectgraph", min_length=1, max_length=200)
    data_directory: Path = Field(default_factory=lambda: Path("~/.objectgraph").expanduser())
    db_name: str = "objectgraph.db"

    @field_validator("data_directory", mode="before")
    @classmethod
    def expand_path(cls, v: Path | str) -> Path:
        """Expand user path and resolve to absolute."""
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser().resolve()

    @field_validator("db_name")
    @classmethod
    def validate_db_name(cls, v: str) -> str:
        """Database name must be a bare file name."""
        if not v or Path(v).name != v:
            raise ValueError("db_name must be a file name without directories")
        return v

    @property
    def db_path(self) -> Path:
        """Full path of the SQLite file used by the local backend."""
        return self.data_directory / self.db_name


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"
    compression: str | None = None


class Config(BaseSettings):
    """Root configuration for objectgraph."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "OBJECTGRAPH_",
        "env_nested_delimiter": "__",
    }
