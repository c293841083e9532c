"""Tests for llmcheck.config -- config file and environment overrides."""

from __future__ import annotations

import json
import os
import stat

import pytest

from llmcheck.config import Settings, config_dir, load_config, save_config
from llmcheck.errors import LLMCheckError
from llmcheck.hardware import PROBE_TIMEOUT


class TestConfigFile:
    def test_config_dir_from_env(self, isolated_home) -> None:
        assert config_dir() == isolated_home

    def test_missing_file_is_empty(self, isolated_home) -> None:
        assert load_config() == {}

    def test_save_and_load(self, isolated_home) -> None:
        save_config({"offline": True})
        path = isolated_home / "config.json"
        assert json.loads(path.read_text()) == {"offline": True}
        assert load_config() == {"offline": True}
        if os.name == "posix":
            assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_corrupt_file_is_ignored(self, isolated_home) -> None:
        (isolated_home / "config.json").write_text("{oops")
        assert load_config() == {}

    def test_non_mapping_is_ignored(self, isolated_home) -> None:
        (isolated_home / "config.json").write_text("[1, 2]")
        assert load_config() == {}


class TestSettings:
    def test_defaults(self, isolated_home) -> None:
        settings = Settings.load()
        assert settings.probe_timeout == PROBE_TIMEOUT
        assert settings.offline is False
        assert settings.remote_catalog_limit == 50
        assert settings.scoring == {}
        assert settings.cache_dir == isolated_home

    def test_file_values(self, isolated_home) -> None:
        save_config(
            {
                "probe_timeout": 5,
                "offline": True,
                "remote_catalog_limit": 10,
                "scoring": {"tiers": [[0, "All"]]},
            }
        )
        settings = Settings.load()
        assert settings.probe_timeout == 5.0
        assert settings.offline is True
        assert settings.remote_catalog_limit == 10
        assert settings.scoring == {"tiers": [[0, "All"]]}

    def test_env_beats_file(self, isolated_home, monkeypatch) -> None:
        save_config({"probe_timeout": 5, "offline": False})
        monkeypatch.setenv("LLMCHECK_PROBE_TIMEOUT", "8.5")
        monkeypatch.setenv("LLMCHECK_OFFLINE", "yes")
        settings = Settings.load()
        assert settings.probe_timeout == 8.5
        assert settings.offline is True

    def test_env_can_disable_offline(self, isolated_home, monkeypatch) -> None:
        save_config({"offline": True})
        monkeypatch.setenv("LLMCHECK_OFFLINE", "0")
        assert Settings.load().offline is False

    @pytest.mark.parametrize(
        "value, expected",
        [("false", False), ("no", False), ("0", False), ("true", True), ("Yes", True), (True, True), (0, False)],
    )
    def test_offline_string_values(self, isolated_home, value, expected) -> None:
        save_config({"offline": value})
        assert Settings.load().offline is expected

    @pytest.mark.parametrize(
        "config",
        [{"probe_timeout": "fast"}, {"probe_timeout": 0}, {"remote_catalog_limit": "lots"}],
    )
    def test_invalid_file_values(self, isolated_home, config) -> None:
        save_config(config)
        with pytest.raises(LLMCheckError):
            Settings.load()

    def test_invalid_env_timeout(self, isolated_home, monkeypatch) -> None:
        monkeypatch.setenv("LLMCHECK_PROBE_TIMEOUT", "soon")
        with pytest.raises(LLMCheckError):
            Settings.load()
