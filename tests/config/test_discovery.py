"""Tests for config discovery."""

from pathlib import Path

import pytest

from tenurectl.config.discovery import CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_finds_in_current_dir(self, work_dir: Path) -> None:
        config_file = work_dir / CONFIG_FILENAME
        config_file.write_text('[display]\nlocale = "ar"\n')
        assert find_config(work_dir) == config_file

    def test_walks_up(self, work_dir: Path) -> None:
        config_file = work_dir / CONFIG_FILENAME
        config_file.write_text("")
        child = work_dir / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, work_dir: Path) -> None:
        child = work_dir / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, work_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = work_dir / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv("TENURECTL_CONFIG", str(config_file))
        assert find_config(work_dir) == config_file

    def test_env_var_missing_file(self, work_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (work_dir / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("TENURECTL_CONFIG", str(work_dir / "absent.toml"))
        assert find_config(work_dir) is None
