from pathlib import Path

import pytest

from akisa.config.context import ContainerSettings, PlatformConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("AKISA_DETECT_CYCLES", raising=False)
    monkeypatch.delenv("AKISA_LOG_IMPL", raising=False)


def test_platform_config_overrides_environment(monkeypatch):
    monkeypatch.setenv("AKISA_LOG_IMPL", "pretty")
    config = PlatformConfig(overrides={"AKISA_LOG_IMPL": "memory"})
    assert config.get("AKISA_LOG_IMPL") == "memory"
    assert "AKISA_LOG_IMPL" in config
    assert config.get("MISSING", "fallback") == "fallback"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("1", True), ("YES", True), ("off", False), ("0", False), ("", True)],
)
def test_get_bool(raw, expected):
    config = PlatformConfig(overrides={"FLAG": raw})
    assert config.get_bool("FLAG", default=True) is expected


def test_get_bool_rejects_garbage():
    config = PlatformConfig(overrides={"FLAG": "maybe"})
    with pytest.raises(ValueError, match="FLAG must be a boolean"):
        config.get_bool("FLAG")


def test_settings_defaults():
    settings = ContainerSettings()
    assert settings.detect_cycles is True
    assert settings.log_impl == "noop"


def test_settings_from_config():
    config = PlatformConfig(
        overrides={"AKISA_DETECT_CYCLES": "false", "AKISA_LOG_IMPL": "memory"}
    )
    settings = ContainerSettings.from_config(config)
    assert settings == ContainerSettings(detect_cycles=False, log_impl="memory")


def test_settings_from_env_file_precedence(tmp_path: Path, monkeypatch):
    env_dir = tmp_path / ".env"
    env_dir.mkdir()
    (env_dir / "local.env").write_text("AKISA_DETECT_CYCLES=false\nAKISA_LOG_IMPL=pretty\n")

    settings = ContainerSettings.from_env(env_file="local", project_root=tmp_path)
    assert settings == ContainerSettings(detect_cycles=False, log_impl="pretty")

    monkeypatch.setenv("AKISA_LOG_IMPL", "memory")
    settings = ContainerSettings.from_env(env_file="local", project_root=tmp_path)
    assert settings.log_impl == "memory"

    settings = ContainerSettings.from_env(
        env_file="local",
        project_root=tmp_path,
        overrides={"AKISA_LOG_IMPL": "noop", "AKISA_DETECT_CYCLES": "true"},
    )
    assert settings == ContainerSettings()
