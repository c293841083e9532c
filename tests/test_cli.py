"""Tests for llmcheck.cli -- Click command-line interface."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from conftest import gaming_rig, office_laptop

from llmcheck import __version__
from llmcheck.cli import main
from llmcheck.config import save_config


@pytest.fixture
def runner(isolated_home, monkeypatch):
    monkeypatch.setenv("LLMCHECK_OFFLINE", "1")
    return CliRunner()


@pytest.fixture
def on_rig():
    with patch("llmcheck.cli_helpers.detect_hardware", return_value=gaming_rig()) as mock:
        yield mock


@pytest.fixture
def on_laptop():
    with patch("llmcheck.cli_helpers.detect_hardware", return_value=office_laptop()) as mock:
        yield mock


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestMainGroup:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for name in ("detect", "score", "models", "upgrade", "report", "benchmark"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_shows_welcome(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 0
        assert "Get started" in result.output

    def test_invalid_config_fails(self, runner, on_rig):
        save_config({"probe_timeout": "soon"})
        result = runner.invoke(main, ["detect"])
        assert result.exit_code != 0
        assert "invalid config value" in result.output


# ---------------------------------------------------------------------------
# detect / score
# ---------------------------------------------------------------------------


class TestDetect:
    def test_text(self, runner, on_rig):
        result = runner.invoke(main, ["detect"])
        assert result.exit_code == 0
        assert "NVIDIA GeForce RTX 3060" in result.output
        assert "CUDA" in result.output

    def test_json(self, runner, on_rig):
        result = runner.invoke(main, ["detect", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["gpu"]["vram_gb"] == 12.0
        assert data["os_tag"] == "linux"

    def test_timeout_comes_from_settings(self, runner, on_rig, monkeypatch):
        monkeypatch.setenv("LLMCHECK_PROBE_TIMEOUT", "3")
        runner.invoke(main, ["detect", "--json"])
        on_rig.assert_called_once_with(timeout=3.0)


class TestScore:
    def test_text(self, runner, on_rig):
        result = runner.invoke(main, ["score"])
        assert result.exit_code == 0
        assert "Enthusiast" in result.output
        assert "13B (quantized)" in result.output

    def test_json(self, runner, on_laptop):
        result = runner.invoke(main, ["score", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["primary_bottleneck"] == "GPU"
        assert data["breakdown"]["gpu"] == 5


# ---------------------------------------------------------------------------
# models / upgrade
# ---------------------------------------------------------------------------


class TestModels:
    def test_json_sorted_by_compatibility(self, runner, on_rig):
        result = runner.invoke(main, ["models", "--offline", "--json", "--limit", "0"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data
        scores = [m["compatibility_score"] for m in data]
        assert scores == sorted(scores, reverse=True)

    def test_limit(self, runner, on_rig):
        result = runner.invoke(main, ["models", "--json", "--limit", "3"])
        assert len(json.loads(result.output)) == 3

    def test_family_filter(self, runner, on_rig):
        result = runner.invoke(main, ["models", "--json", "--family", "llama", "--all"])
        data = json.loads(result.output)
        assert data
        assert {m["model"]["family"] for m in data} == {"Llama"}

    def test_unknown_family(self, runner, on_rig):
        result = runner.invoke(main, ["models", "--family", "nope"])
        assert result.exit_code == 0
        assert "No compatible models" in result.output

    def test_offline_skips_remote(self, runner, on_rig):
        with patch("llmcheck.sources.HuggingFaceCatalog") as catalog:
            runner.invoke(main, ["models", "--json"])
        catalog.assert_not_called()


class TestUpgrade:
    def test_laptop_gets_recommendations(self, runner, on_laptop):
        result = runner.invoke(main, ["upgrade"])
        assert result.exit_code == 0
        assert "GPU (5/100)" in result.output
        assert "[High]" in result.output

    def test_rig_needs_nothing(self, runner, on_rig):
        result = runner.invoke(main, ["upgrade"])
        assert "No upgrades needed" in result.output

    def test_json(self, runner, on_laptop):
        result = runner.invoke(main, ["upgrade", "--json"])
        data = json.loads(result.output)
        assert len(data) == 5
        assert data[0]["component"] == "GPU"


# ---------------------------------------------------------------------------
# report / benchmark
# ---------------------------------------------------------------------------


class TestReport:
    def test_stdout(self, runner, on_laptop):
        result = runner.invoke(main, ["report", "--offline"])
        assert result.exit_code == 0
        assert "UPGRADE RECOMMENDATIONS" in result.output

    def test_json_to_file(self, runner, on_rig, tmp_path):
        target = tmp_path / "out" / "report.json"
        result = runner.invoke(main, ["report", "--format", "json", "-o", str(target)])
        assert result.exit_code == 0
        assert "Report written to" in result.output
        data = json.loads(target.read_text())
        assert data["scores"]["system_tier"] == "Enthusiast"
        assert data["upgrades"] == []

    def test_write_failure(self, runner, on_rig, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        result = runner.invoke(main, ["report", "-o", str(blocker / "report.txt")])
        assert result.exit_code != 0
        assert "could not write report" in result.output

    def test_bad_format(self, runner, on_rig):
        result = runner.invoke(main, ["report", "--format", "pdf"])
        assert result.exit_code != 0


class TestBenchmark:
    def test_json(self, runner, on_rig):
        result = runner.invoke(main, ["benchmark", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["comparison_to_reference"] == 240.6

    def test_text(self, runner, on_rig):
        result = runner.invoke(main, ["benchmark"])
        assert result.exit_code == 0
        assert "Tokens/s" in result.output
        assert "70B" in result.output
