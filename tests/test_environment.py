import pytest
from pathlib import Path

from syncgroup.environment import LoggingSettings, SyncOptions, env_flag
from syncgroup.errors import ConfigurationError


def test_group_path_defaults_to_filesystem_path():
    options = SyncOptions(project_path="App.xcodeproj", targets="Core", filesystem_path="Core/Generated")
    assert options.group_path == "Core/Generated"
    assert options.file_filter == "*"


def test_explicit_group_path_is_kept():
    options = SyncOptions(
        project_path="App.xcodeproj", targets="Core", filesystem_path="Sources/Generated", group_path="Generated"
    )
    assert options.group_path == "Generated"


def test_target_names_are_trimmed():
    options = SyncOptions(project_path="App.xcodeproj", targets=" Core , Tests,", filesystem_path=".")
    assert options.target_names == ["Core", "Tests"]


def test_blank_targets_rejected():
    with pytest.raises(ValueError):
        SyncOptions(project_path="App.xcodeproj", targets=" , ", filesystem_path=".")


def test_build_prefers_explicit_values(monkeypatch):
    monkeypatch.setenv("SYNCGROUP_TARGETS", "FromEnv")
    monkeypatch.setenv("SYNCGROUP_PATH", "env/path")
    options = SyncOptions.build("App.xcodeproj", targets="Core", filesystem_path="cli/path")
    assert options.targets == "Core"
    assert options.filesystem_path == Path("cli/path")


def test_build_falls_back_to_environment(monkeypatch):
    monkeypatch.setenv("SYNCGROUP_TARGETS", "Core")
    monkeypatch.setenv("SYNCGROUP_PATH", "Sources")
    monkeypatch.setenv("SYNCGROUP_GROUP", "App/Sources")
    monkeypatch.setenv("SYNCGROUP_FILTER", "*.swift")
    options = SyncOptions.build("App.xcodeproj")
    assert options.targets == "Core"
    assert options.filesystem_path == Path("Sources")
    assert options.group_path == "App/Sources"
    assert options.file_filter == "*.swift"


@pytest.mark.parametrize("kwargs,missing", [
    ({"filesystem_path": "Sources"}, "--targets"),
    ({"targets": "Core"}, "--path"),
])
def test_build_requires_values(kwargs, missing):
    with pytest.raises(ConfigurationError) as excinfo:
        SyncOptions.build("App.xcodeproj", **kwargs)
    assert missing in excinfo.value.display_value


def test_build_wraps_validation_errors():
    with pytest.raises(ConfigurationError):
        SyncOptions.build("App.xcodeproj", targets=",", filesystem_path="Sources")


def test_logging_settings_from_env(monkeypatch):
    monkeypatch.setenv("SYNCGROUP_LOG_LEVEL", "debug")
    monkeypatch.setenv("SYNCGROUP_DEBUG", "yes")
    monkeypatch.setenv("SYNCGROUP_LOG_FILE", "sync.log")
    settings = LoggingSettings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.debug is True
    assert settings.log_file == "sync.log"


def test_logging_settings_invalid_level():
    assert LoggingSettings(log_level="LOUD").log_level == "WARNING"


def test_logging_settings_defaults():
    settings = LoggingSettings.from_env()
    assert settings.log_level == "WARNING"
    assert settings.debug is False


@pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("no", False), ("", False)])
def test_env_flag(monkeypatch, value, expected):
    monkeypatch.setenv("SYNCGROUP_DEBUG", value)
    assert env_flag("SYNCGROUP_DEBUG") is expected
