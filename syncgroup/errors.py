"""
Error kinds raised while synchronizing a project group.

Every error is fatal. Library code raises them and the CLI reports them in one
place, see ``syncgroup.cli.main.report_error``.
"""

from typing import Any


class SyncError(Exception):
    """Base exception for synchronization errors."""

    description = "Synchronization failed:"

    def __init__(self, value: Any = None, message: str | None = None):
        self.value = value
        if message is None:
            message = self.description if value is None else f"{self.description} {value}"
        self.message = message
        super().__init__(self.message)

    @property
    def display_value(self) -> str:
        """The offending value rendered for the terminal."""
        if self.value is None:
            return ""
        if isinstance(self.value, (list, tuple, set)):
            return ", ".join(str(item) for item in self.value)
        return str(self.value)


class ProjectNotFound(SyncError):
    """Raised when the project container cannot be opened."""

    description = "Project not found:"


class GroupNotFound(SyncError):
    """Raised when a group path does not resolve within the project tree."""

    description = "Project group not found:"


class PathNotFound(SyncError):
    """Raised when the filesystem directory does not exist."""

    description = "File system path not found:"


class TargetsNotFound(SyncError):
    """Raised when one or more requested targets do not exist."""

    description = "Project targets not found:"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(self.missing, f"{self.description} {', '.join(self.missing)}")


class SaveFailed(SyncError):
    """Raised when the project cannot be written back to disk."""

    description = "Failed to save project:"


class ConfigurationError(SyncError):
    """Raised when a required option is missing or invalid."""

    description = "Invalid configuration:"
