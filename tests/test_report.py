"""Tests for llmcheck.report -- JSON and text export."""

from __future__ import annotations

import json

import pytest

from llmcheck import __version__
from llmcheck.advisor import advise
from llmcheck.errors import ReportExportError
from llmcheck.models import ModelDatabase
from llmcheck.report import export_json, export_text, render_report, save_report
from llmcheck.scoring import score_system


@pytest.fixture
def laptop_report(laptop):
    scores = score_system(laptop)
    models = ModelDatabase().get_recommended(laptop)[:3]
    return laptop, scores, models, advise(laptop, scores)


class TestJson:
    def test_structure(self, laptop_report) -> None:
        data = json.loads(export_json(*laptop_report))
        assert set(data) == {"metadata", "hardware", "scores", "recommended_models", "upgrades"}
        assert data["metadata"]["llmcheck_version"] == __version__
        assert data["metadata"]["report_version"] == "1.0"
        assert data["hardware"]["storage"]["storage_type"] == "HDD"
        assert data["scores"]["primary_bottleneck"] == "GPU"
        assert len(data["recommended_models"]) == 3
        assert data["upgrades"][0]["priority"] == "High"

    def test_upgrades_optional(self, laptop_report) -> None:
        snapshot, scores, models, _ = laptop_report
        assert json.loads(export_json(snapshot, scores, models))["upgrades"] == []


class TestText:
    def test_sections(self, laptop_report) -> None:
        text = export_text(*laptop_report)
        for heading in (
            "LLM CAPABILITY CHECKER REPORT",
            "SYSTEM OVERVIEW",
            "HARDWARE INFORMATION",
            "COMPONENT SCORES",
            "WORKLOAD SCORES",
            "RECOMMENDED MODELS",
            "UPGRADE RECOMMENDATIONS",
        ):
            assert heading in text
        assert "GPU (5/100)" in text
        assert "Intel HD Graphics 620" in text
        assert text.endswith("\n")

    def test_no_models(self, laptop_report) -> None:
        snapshot, scores, _, _ = laptop_report
        text = export_text(snapshot, scores, [])
        assert "No models recommended" in text
        assert "UPGRADE RECOMMENDATIONS" not in text


class TestRenderAndSave:
    def test_render_dispatches_by_format(self, laptop_report) -> None:
        assert render_report("JSON", *laptop_report).startswith("{")
        assert "SYSTEM OVERVIEW" in render_report("text", *laptop_report)

    def test_unknown_format(self, laptop_report) -> None:
        with pytest.raises(ReportExportError):
            render_report("pdf", *laptop_report)

    def test_save_creates_parent_dirs(self, tmp_path) -> None:
        target = save_report("hello\n", tmp_path / "nested" / "report.txt")
        assert target.read_text() == "hello\n"

    def test_save_failure(self, tmp_path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(ReportExportError):
            save_report("hello", blocker / "report.txt")
