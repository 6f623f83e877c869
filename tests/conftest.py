"""
Test Configuration and Fixtures
=============================

This module provides pytest fixtures and in-memory project fakes for testing
syncgroup without touching a real project file.
"""

import os
import shutil
from pathlib import Path

import pytest

from syncgroup.project.models import GROUP_SOURCE_TREE

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeFile:
    def __init__(self, path: str, source_tree: str = GROUP_SOURCE_TREE):
        self.path = path
        self.source_tree = source_tree

    def __repr__(self) -> str:
        return f"FakeFile({self.path!r})"


class FakePhase:
    def __init__(self, kind: str = "sources"):
        self.kind = kind
        self.entries: list[FakeFile] = []

    def add_file(self, entry: FakeFile) -> None:
        self.entries.append(entry)

    @property
    def names(self) -> list[str]:
        return [entry.path for entry in self.entries]


class FakeTarget:
    def __init__(self, name: str, phases: list[FakePhase] | None = None):
        self.name = name
        self.phases = phases if phases is not None else [FakePhase("frameworks"), FakePhase("sources")]

    def build_phases(self) -> list[FakePhase]:
        return self.phases

    @property
    def sources(self) -> FakePhase:
        return next(phase for phase in self.phases if phase.kind == "sources")


class FakeGroup:
    def __init__(self, display_name: str, entries=None, groups=None):
        self.display_name = display_name
        self.entries: list[FakeFile] = [FakeFile(name) for name in entries or []]
        self.groups: list[FakeGroup] = list(groups or [])

    def child_groups(self) -> list["FakeGroup"]:
        return self.groups

    def files(self) -> list[FakeFile]:
        return list(self.entries)

    def new_file(self, path: str, source_tree: str = GROUP_SOURCE_TREE) -> FakeFile:
        entry = FakeFile(path, source_tree)
        self.entries.append(entry)
        return entry

    def walk(self):
        yield self
        for group in self.groups:
            yield from group.walk()

    @property
    def names(self) -> set[str]:
        return {entry.path for entry in self.entries}


class FakeProject:
    def __init__(self, main_group: FakeGroup, targets: list[FakeTarget], path: str = "App.xcodeproj"):
        self.root = main_group
        self._targets = targets
        self.path = Path(path)
        self.save_count = 0

    def targets(self) -> list[FakeTarget]:
        return self._targets

    def main_group(self) -> FakeGroup:
        return self.root

    def files(self):
        for group in self.root.walk():
            yield from group.entries

    def remove_file(self, entry: FakeFile) -> None:
        for group in self.root.walk():
            if entry in group.entries:
                group.entries.remove(entry)
        for target in self._targets:
            for phase in target.phases:
                if entry in phase.entries:
                    phase.entries.remove(entry)

    def save(self) -> None:
        self.save_count += 1


@pytest.fixture
def generated_group() -> FakeGroup:
    return FakeGroup("Generated", ["a.m", "b.m", "README.txt"])


@pytest.fixture
def fake_project(generated_group: FakeGroup) -> FakeProject:
    """Project with ``Core/Generated`` holding a.m and b.m, and targets Core and CoreTests."""
    core = FakeGroup("Core", ["AppDelegate.m"], [generated_group])
    main = FakeGroup("", [], [core])
    return FakeProject(main, [FakeTarget("Core"), FakeTarget("CoreTests")])


@pytest.fixture
def fake_loader(fake_project: FakeProject):
    calls = []

    def loader(path: Path) -> FakeProject:
        calls.append(path)
        return fake_project

    loader.calls = calls
    return loader


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Directory holding b.m, c.m and an unrelated notes.txt."""
    directory = tmp_path / "Generated"
    directory.mkdir()
    for name in ["b.m", "c.m", "notes.txt"]:
        (directory / name).write_text(f"// {name}\n")
    return directory


@pytest.fixture
def xcode_project(tmp_path: Path) -> Path:
    """A copy of ``tests/fixtures/App.xcodeproj`` inside ``tmp_path``."""
    destination = tmp_path / "App.xcodeproj"
    shutil.copytree(FIXTURES_DIR / "App.xcodeproj", destination)
    return destination


@pytest.fixture(autouse=True)
def clean_syncgroup_env(monkeypatch):
    """Keep ``SYNCGROUP_*`` variables from the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("SYNCGROUP_"):
            monkeypatch.delenv(name, raising=False)
