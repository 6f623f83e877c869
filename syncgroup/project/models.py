"""
Project Model Interfaces
========================

Structural interfaces for the pieces of a project graph the synchronizer touches.
The Xcode adapter in ``syncgroup.project.xcode`` implements them on top of
``pbxproj``; the test suite implements them in memory.
"""

from pathlib import Path
from typing import Iterable, Protocol

SOURCES_PHASE = "sources"
GROUP_SOURCE_TREE = "<group>"


class FileEntry(Protocol):
    """A file reference inside the project tree."""

    @property
    def path(self) -> str: ...


class BuildPhase(Protocol):
    """An ordered list of build files belonging to one target."""

    @property
    def kind(self) -> str: ...

    def add_file(self, entry: FileEntry) -> None: ...


class Target(Protocol):
    @property
    def name(self) -> str: ...

    def build_phases(self) -> list[BuildPhase]: ...


class Group(Protocol):
    """A node in the project's logical file tree."""

    @property
    def display_name(self) -> str: ...

    def child_groups(self) -> list["Group"]: ...

    def files(self) -> list[FileEntry]: ...

    def new_file(self, path: str, source_tree: str = GROUP_SOURCE_TREE) -> FileEntry: ...


class Project(Protocol):
    @property
    def path(self) -> Path: ...

    def targets(self) -> list[Target]: ...

    def main_group(self) -> Group: ...

    def files(self) -> Iterable[FileEntry]: ...

    def remove_file(self, entry: FileEntry) -> None: ...

    def save(self) -> None: ...


class ProjectLoader(Protocol):
    """Opens a project container from disk."""

    def __call__(self, path: Path) -> Project: ...
