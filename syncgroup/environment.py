"""Configuration for a synchronization run."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator, model_validator

from syncgroup.errors import ConfigurationError

load_dotenv()

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_FILTER = "*"


def env_flag(name: str) -> bool:
    """Interpret an environment variable as a boolean switch."""
    return os.getenv(name, "").lower() in ["true", "1", "yes"]


class LoggingSettings(BaseModel):
    """Logging configuration read from ``SYNCGROUP_*`` variables."""

    log_level: str = Field("WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
    debug: bool = Field(False, description="Also write logs to a file")
    log_file: str = Field("syncgroup.log", description="Log file used when debug is enabled")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = str(value or "").upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(f"Invalid log level: {value}. Using WARNING.")
            return "WARNING"
        return level

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        return cls(
            log_level=os.getenv("SYNCGROUP_LOG_LEVEL", "WARNING"),
            debug=env_flag("SYNCGROUP_DEBUG"),
            log_file=os.getenv("SYNCGROUP_LOG_FILE", "syncgroup.log"),
        )


class SyncOptions(BaseModel):
    """Everything a synchronization run needs.

    ``group_path`` falls back to ``filesystem_path``: most projects mirror the
    on-disk folder layout in their groups.
    """

    project_path: Path
    targets: str
    filesystem_path: Path
    group_path: str = ""
    file_filter: str = DEFAULT_FILTER
    verbose: bool = False
    dry_run: bool = False

    @field_validator("targets")
    @classmethod
    def require_targets(cls, value: str) -> str:
        if not [name for name in value.split(",") if name.strip()]:
            raise ValueError("at least one target name is required")
        return value

    @field_validator("file_filter")
    @classmethod
    def default_filter(cls, value: str) -> str:
        return value or DEFAULT_FILTER

    @model_validator(mode="after")
    def default_group_path(self) -> "SyncOptions":
        if not self.group_path:
            self.group_path = str(self.filesystem_path)
        return self

    @property
    def target_names(self) -> list[str]:
        return [name.strip() for name in self.targets.split(",") if name.strip()]

    @classmethod
    def build(
        cls,
        project_path: str | Path,
        targets: Optional[str] = None,
        filesystem_path: Optional[str | Path] = None,
        group_path: Optional[str] = None,
        file_filter: Optional[str] = None,
        verbose: bool = False,
        dry_run: bool = False,
    ) -> "SyncOptions":
        """Merge explicit values over ``SYNCGROUP_*`` environment defaults.

        Raises:
            ConfigurationError: If a required value is missing or invalid
        """
        targets = targets or os.getenv("SYNCGROUP_TARGETS")
        filesystem_path = filesystem_path or os.getenv("SYNCGROUP_PATH")
        group_path = group_path or os.getenv("SYNCGROUP_GROUP", "")
        file_filter = file_filter or os.getenv("SYNCGROUP_FILTER", DEFAULT_FILTER)

        if not targets:
            raise ConfigurationError("--targets (or SYNCGROUP_TARGETS) is required")
        if not filesystem_path:
            raise ConfigurationError("--path (or SYNCGROUP_PATH) is required")

        try:
            return cls(
                project_path=Path(project_path),
                targets=targets,
                filesystem_path=Path(filesystem_path),
                group_path=group_path,
                file_filter=file_filter,
                verbose=verbose,
                dry_run=dry_run,
            )
        except ValueError as error:
            raise ConfigurationError(str(error)) from error
