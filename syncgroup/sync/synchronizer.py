"""
Group Synchronization Module
============================

Reconciles the file references in one project group with the files present in
a directory on disk. Files that exist only on disk are added to the group and to
the sources build phase of every requested target; references whose file is gone
are removed from the project. The project is saved only when something changed.
"""

import glob
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from loguru import logger

from syncgroup.environment import SyncOptions
from syncgroup.errors import GroupNotFound, PathNotFound, ProjectNotFound, TargetsNotFound
from syncgroup.project.models import (
    GROUP_SOURCE_TREE,
    SOURCES_PHASE,
    Group,
    Project,
    ProjectLoader,
    Target,
)


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one synchronization run."""

    to_add: tuple[str, ...]
    to_remove: tuple[str, ...]
    saved: bool = False
    dry_run: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.to_add or self.to_remove)


def filter_suffix(file_filter: str) -> str:
    """Reduce a glob filter to the bare suffix used for group entries.

    Every non-word character is dropped, so ``*.swift`` becomes ``swift`` and
    ``*`` becomes the empty string, which matches every entry.
    """
    return re.sub(r"\W+", "", file_filter)


class Synchronizer:
    """Synchronizes a project group with a filesystem directory."""

    def __init__(self, loader: ProjectLoader):
        """Initialize the Synchronizer.

        Args:
            loader: Callable that opens a project container from a path
        """
        self.loader = loader

    def open_project(self, project_path: str | Path) -> Project:
        """Open the project container at ``project_path``.

        Raises:
            ProjectNotFound: If the loader cannot open the path
        """
        try:
            return self.loader(Path(project_path))
        except ProjectNotFound:
            raise
        except OSError as error:
            raise ProjectNotFound(project_path) from error

    def resolve_targets(self, project: Project, target_names: str) -> list[Target]:
        """Find the targets named in a comma-separated list, ignoring case.

        Targets are returned in project order.

        Raises:
            TargetsNotFound: Listing every requested name that has no match
        """
        requested = [name.strip() for name in target_names.split(",") if name.strip()]
        wanted = {name.casefold() for name in requested}

        found = [target for target in project.targets() if target.name.casefold() in wanted]
        found_names = {target.name.casefold() for target in found}

        missing = [name for name in requested if name.casefold() not in found_names]
        if missing:
            raise TargetsNotFound(missing)

        logger.debug(f"Resolved targets: {[target.name for target in found]}")
        return found

    def resolve_group(self, project: Project, group_path: str) -> Group:
        """Walk ``group_path`` (``/``-separated) down from the project's main group.

        Raises:
            GroupNotFound: If any component has no matching child group
        """
        group = project.main_group()
        for component in (part for part in str(group_path).split("/") if part):
            group = next(
                (child for child in group.child_groups() if child.display_name == component),
                None,
            )
            if group is None:
                raise GroupNotFound(group_path)
        return group

    def list_group_files(self, group: Group, file_filter: str) -> set[str]:
        """Basenames of the group's file entries whose lowercased path ends with the filter suffix.

        Only the path is lowercased, so an upper-case filter such as ``*.M`` matches nothing.
        """
        suffix = filter_suffix(file_filter)
        return {
            os.path.basename(entry.path)
            for entry in group.files()
            if entry.path.lower().endswith(suffix)
        }

    def list_filesystem_files(self, directory: str | Path, file_filter: str) -> set[str]:
        """Basenames matching ``directory/file_filter``.

        Raises:
            PathNotFound: If the directory does not exist
        """
        if not os.path.isdir(directory):
            raise PathNotFound(directory)
        pattern = os.path.join(glob.escape(os.fspath(directory)), file_filter)
        return {os.path.basename(match) for match in glob.glob(pattern)}

    @staticmethod
    def diff(group_names: Iterable[str], filesystem_names: Iterable[str]) -> tuple[set[str], set[str]]:
        """Return ``(to_add, to_remove)``; names present on both sides are left alone."""
        group_names = set(group_names)
        filesystem_names = set(filesystem_names)
        return filesystem_names - group_names, group_names - filesystem_names

    def add_files(self, targets: list[Target], group: Group, names: Iterable[str]) -> None:
        """Create a reference for each name and link it to every target's sources phase."""
        for name in sorted(names):
            entry = group.new_file(name, GROUP_SOURCE_TREE)
            for target in targets:
                phase = next(
                    (phase for phase in target.build_phases() if phase.kind == SOURCES_PHASE),
                    None,
                )
                if phase is None:
                    logger.warning(f"Target {target.name} has no sources build phase, {name} not linked")
                    continue
                phase.add_file(entry)
            logger.debug(f"Added {name}")

    def remove_files(self, project: Project, names: Iterable[str]) -> None:
        """Detach the first project file whose basename matches each name."""
        for name in sorted(names):
            entry = next(
                (entry for entry in project.files() if os.path.basename(entry.path) == name),
                None,
            )
            if entry is None:
                logger.debug(f"No file reference for {name}, skipping")
                continue
            project.remove_file(entry)
            logger.debug(f"Removed {name}")

    def save_project(self, project: Project) -> None:
        """Write the project back to disk.

        Raises:
            SaveFailed: If the project cannot be written
        """
        project.save()
        logger.info(f"Saved {project.path}")

    def run(self, options: SyncOptions) -> SyncResult:
        """Synchronize the configured group with the configured directory.

        Args:
            options: Run configuration

        Returns:
            SyncResult: The names added and removed and whether the project was saved

        Raises:
            SyncError: Any of its subclasses, on the first fatal problem
        """
        project = self.open_project(options.project_path)
        targets = self.resolve_targets(project, options.targets)
        group = self.resolve_group(project, options.group_path)

        group_names = self.list_group_files(group, options.file_filter)
        filesystem_names = self.list_filesystem_files(options.filesystem_path, options.file_filter)
        to_add, to_remove = self.diff(group_names, filesystem_names)
        logger.info(f"{len(to_add)} to add, {len(to_remove)} to remove")

        result = SyncResult(tuple(sorted(to_add)), tuple(sorted(to_remove)), dry_run=options.dry_run)
        if options.dry_run or not result.changed:
            return result

        self.add_files(targets, group, to_add)
        self.remove_files(project, to_remove)
        self.save_project(project)
        return SyncResult(result.to_add, result.to_remove, saved=True)
