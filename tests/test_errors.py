from pathlib import Path

from syncgroup.errors import GroupNotFound, PathNotFound, SyncError, TargetsNotFound


def test_message_includes_value():
    error = GroupNotFound("Core/Generated")
    assert str(error) == "Project group not found: Core/Generated"
    assert error.display_value == "Core/Generated"
    assert isinstance(error, SyncError)


def test_targets_not_found_lists_names():
    error = TargetsNotFound(["Tests", "Widget"])
    assert error.missing == ["Tests", "Widget"]
    assert error.display_value == "Tests, Widget"
    assert str(error) == "Project targets not found: Tests, Widget"


def test_path_value_is_rendered():
    assert PathNotFound(Path("a/b")).display_value == "a/b"
    assert SyncError().display_value == ""
