"""Filesystem helpers for locating project containers."""

from pathlib import Path

from loguru import logger

PROJECT_SUFFIXES = (".xcodeproj",)
PROJECT_FILE_NAME = "project.pbxproj"


def is_project_container(path: Path) -> bool:
    return path.is_dir() and path.suffix in PROJECT_SUFFIXES


def find_project_container(directory: str | Path = ".") -> Path | None:
    """Return the first project container directory in ``directory``, if any.

    Entries are checked in name order so the result is stable between runs.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return None
    for entry in sorted(directory.iterdir()):
        if is_project_container(entry):
            logger.debug(f"Found project container {entry}")
            return entry
    return None


def resolve_pbxproj_path(path: str | Path) -> Path:
    """Map a ``.xcodeproj`` folder to the ``project.pbxproj`` inside it.

    Any other path is returned unchanged.
    """
    path = Path(path)
    if path.suffix in PROJECT_SUFFIXES or path.is_dir():
        return path / PROJECT_FILE_NAME
    return path
