"""
Xcode Project Adapter
=====================

Wraps ``pbxproj.XcodeProject`` so the synchronizer can work with the interfaces
in ``syncgroup.project.models``. All parsing, object creation and serialization
is done by pbxproj; this module only walks and mutates its object graph.
"""

import os
import re
from pathlib import Path
from typing import Iterator

from loguru import logger
from pbxproj import XcodeProject
from pbxproj.pbxsections import PBXBuildFile, PBXFileReference

from syncgroup.errors import ProjectNotFound, SaveFailed
from syncgroup.project.models import GROUP_SOURCE_TREE
from syncgroup.utils.paths import resolve_pbxproj_path

GROUP_ISAS = ("PBXGroup",)
FILE_REFERENCE_SECTION = "PBXFileReference"
BUILD_FILE_SECTION = "PBXBuildFile"


def phase_kind(isa: str) -> str:
    """``PBXSourcesBuildPhase`` -> ``sources``, ``PBXCopyFilesBuildPhase`` -> ``copy_files``."""
    core = re.sub(r"^PBX|BuildPhase$", "", isa)
    return re.sub(r"(?<!^)(?=[A-Z])", "_", core).lower()


class XcodeFileEntry:
    def __init__(self, project: "XcodeProjectAdapter", file_ref):
        self._project = project
        self.file_ref = file_ref

    @property
    def id(self) -> str:
        return self.file_ref.get_id()

    @property
    def path(self) -> str:
        return getattr(self.file_ref, "path", None) or getattr(self.file_ref, "name", "")

    def __repr__(self) -> str:
        return f"XcodeFileEntry({self.path!r})"


class XcodeBuildPhase:
    def __init__(self, project: "XcodeProjectAdapter", phase):
        self._project = project
        self.phase = phase

    @property
    def kind(self) -> str:
        return phase_kind(self.phase.isa)

    def file_ids(self) -> list[str]:
        return list(getattr(self.phase, "files", []))

    def add_file(self, entry: XcodeFileEntry) -> None:
        build_file = PBXBuildFile.create(entry.file_ref)
        self._project.objects[build_file.get_id()] = build_file
        self.phase.add_build_file(build_file)

    def remove_build_files(self, build_files) -> int:
        """Unlink the given ``PBXBuildFile`` objects; the phase stays even when emptied."""
        removed = 0
        for build_file in build_files:
            if build_file.get_id() in self.file_ids():
                self.phase.remove_build_file(build_file)
                removed += 1
        return removed


class XcodeTarget:
    def __init__(self, project: "XcodeProjectAdapter", target):
        self._project = project
        self.target = target

    @property
    def name(self) -> str:
        return str(self.target.name)

    def build_phases(self) -> list[XcodeBuildPhase]:
        phases = []
        for phase_id in getattr(self.target, "buildPhases", []):
            phase = self._project.objects[phase_id]
            if phase is not None:
                phases.append(XcodeBuildPhase(self._project, phase))
        return phases

    def __repr__(self) -> str:
        return f"XcodeTarget({self.name!r})"


class XcodeGroup:
    def __init__(self, project: "XcodeProjectAdapter", group):
        self._project = project
        self.group = group

    @property
    def display_name(self) -> str:
        return str(getattr(self.group, "name", None) or getattr(self.group, "path", None) or "")

    def _children(self) -> Iterator:
        for child_id in getattr(self.group, "children", []):
            child = self._project.objects[child_id]
            if child is not None:
                yield child

    def child_groups(self) -> list["XcodeGroup"]:
        return [XcodeGroup(self._project, child) for child in self._children() if child.isa in GROUP_ISAS]

    def files(self) -> list[XcodeFileEntry]:
        return [
            XcodeFileEntry(self._project, child)
            for child in self._children()
            if child.isa not in GROUP_ISAS and getattr(child, "path", None)
        ]

    def new_file(self, path: str, source_tree: str = GROUP_SOURCE_TREE) -> XcodeFileEntry:
        file_ref = PBXFileReference.create(path, tree=source_tree)
        self._project.objects[file_ref.get_id()] = file_ref
        self.group.add_child(file_ref)
        return XcodeFileEntry(self._project, file_ref)

    def __repr__(self) -> str:
        return f"XcodeGroup({self.display_name!r})"


class XcodeProjectAdapter:
    """A loaded ``project.pbxproj`` exposed through the project interfaces."""

    def __init__(self, project: XcodeProject, path: Path):
        self.project = project
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    @property
    def objects(self):
        return self.project.objects

    def targets(self) -> list[XcodeTarget]:
        return [XcodeTarget(self, target) for target in self.objects.get_targets()]

    def main_group(self) -> XcodeGroup:
        root = self.objects[self.project.rootObject]
        return XcodeGroup(self, self.objects[root.mainGroup])

    def files(self) -> list[XcodeFileEntry]:
        return [
            XcodeFileEntry(self, file_ref)
            for file_ref in self.objects.get_objects_in_section(FILE_REFERENCE_SECTION)
        ]

    def remove_file(self, entry: XcodeFileEntry) -> None:
        """Detach a file reference from every build phase and group, then delete it.

        Build phases are never removed, even when this leaves them empty.
        """
        file_id = entry.id
        build_files = [
            build_file
            for build_file in self.objects.get_objects_in_section(BUILD_FILE_SECTION)
            if getattr(build_file, "fileRef", None) == file_id
        ]
        for target in self.targets():
            for phase in target.build_phases():
                phase.remove_build_files(build_files)

        for group in self.objects.get_objects_in_section(*GROUP_ISAS):
            if group.has_child(file_id):
                group.remove_child(entry.file_ref)

        # build files not linked to any target phase
        for build_file in build_files:
            del self.objects[build_file.get_id()]
        del self.objects[file_id]
        logger.debug(f"Removed file reference {file_id} ({entry.path})")

    def save(self) -> None:
        try:
            self.project.save()
        except OSError as error:
            raise SaveFailed(self._path, f"Failed to save project {self._path}: {error}") from error


def load_project(path: str | Path) -> XcodeProjectAdapter:
    """Open an Xcode project from its ``.xcodeproj`` folder or ``project.pbxproj`` file.

    Args:
        path: Project container or project file

    Returns:
        XcodeProjectAdapter: The loaded project

    Raises:
        ProjectNotFound: If the path does not exist or cannot be parsed
    """
    pbxproj_path = resolve_pbxproj_path(path)
    if not pbxproj_path.is_file():
        raise ProjectNotFound(path)
    try:
        project = XcodeProject.load(os.fspath(pbxproj_path))
    except Exception as error:
        logger.debug(f"pbxproj could not load {pbxproj_path}: {error}")
        raise ProjectNotFound(path) from error
    logger.debug(f"Loaded project {pbxproj_path}")
    return XcodeProjectAdapter(project, pbxproj_path)
