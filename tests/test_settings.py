from pathlib import Path

import pytest

from mp3info.core.config import DEFAULT_CONFIG, SettingsManager


@pytest.fixture(autouse=True)
def _no_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MP3INFO_CONFIG_PATH", raising=False)
    monkeypatch.delenv("MP3INFO_CONFIG_DIR", raising=False)


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    manager = SettingsManager(config_path=tmp_path / "settings.yaml")

    assert manager.get_header_seek_limit() == 2048
    assert manager.get_frames_to_read() == 2
    assert manager.get_remote_block_size() == 4096
    assert manager.get_remote_timeout() == 10.0
    assert manager.get_remote_user_agent() == "mp3info"
    assert manager.get_diagnostics_log_level() == "WARNING"
    assert manager.get_raw() == DEFAULT_CONFIG


def test_yaml_values_are_merged_over_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        "scan:\n  header_seek_limit: 8192\nremote:\n  timeout_seconds: 2.5\ndiagnostics:\n  log_level: debug\n",
        encoding="utf-8",
    )

    manager = SettingsManager(config_path=config_path)

    assert manager.get_header_seek_limit() == 8192
    assert manager.get_frames_to_read() == 2
    assert manager.get_remote_timeout() == 2.5
    assert manager.get_remote_block_size() == 4096
    assert manager.get_diagnostics_log_level() == "DEBUG"


def test_invalid_values_fall_back(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text(
        "scan:\n  header_seek_limit: lots\n  frames_to_read: 0\n"
        "remote:\n  timeout_seconds: -1\n  user_agent: ''\n"
        "diagnostics:\n  log_level: chatty\n",
        encoding="utf-8",
    )

    manager = SettingsManager(config_path=config_path)

    assert manager.get_header_seek_limit() == 2048
    assert manager.get_frames_to_read() == 1
    assert manager.get_remote_timeout() == 10.0
    assert manager.get_remote_user_agent() == "mp3info"
    assert manager.get_diagnostics_log_level() == "WARNING"


def test_non_mapping_file_is_ignored(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    assert SettingsManager(config_path=config_path).get_raw() == DEFAULT_CONFIG


def test_settings_roundtrip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "settings.yaml"
    manager = SettingsManager(config_path=config_path)
    manager.set_header_seek_limit(4096)
    manager.set_frames_to_read(3)
    manager.set_diagnostics_log_level("info")
    manager.save()

    reloaded = SettingsManager(config_path=config_path)
    assert reloaded.get_header_seek_limit() == 4096
    assert reloaded.get_frames_to_read() == 3
    assert reloaded.get_diagnostics_log_level() == "INFO"


def test_environment_overrides_config_location(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "settings.yaml").write_text("scan:\n  frames_to_read: 5\n", encoding="utf-8")
    monkeypatch.setenv("MP3INFO_CONFIG_DIR", str(tmp_path))

    manager = SettingsManager()

    assert manager.config_path == tmp_path / "settings.yaml"
    assert manager.get_frames_to_read() == 5

    explicit = tmp_path / "other.yaml"
    monkeypatch.setenv("MP3INFO_CONFIG_PATH", str(explicit))
    assert SettingsManager().config_path == explicit


def test_scalar_in_place_of_section_keeps_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "settings.yaml"
    config_path.write_text("scan: 5\nremote:\n  block_size: 1024\n", encoding="utf-8")

    manager = SettingsManager(config_path=config_path)

    assert manager.get_header_seek_limit() == 2048
    assert manager.get_frames_to_read() == 2
    assert manager.get_remote_block_size() == 1024
