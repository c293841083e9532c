"""Shared helpers for CLI commands.

Command modules import from here rather than from ``cli.py`` so that the
registration in ``cli.py`` stays free of circular imports.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import click

from .config import Settings
from .errors import LLMCheckError
from .hardware import HardwareSnapshot, detect_hardware
from .models import ModelDatabase
from .scoring import SystemScores, score_system
from .scoring_config import ScoringConfig

_logger = logging.getLogger(__name__)


def _load_settings() -> Settings:
    try:
        return Settings.load()
    except LLMCheckError as exc:
        raise click.ClickException(str(exc)) from exc


def _scoring_config(settings: Settings) -> ScoringConfig:
    try:
        return ScoringConfig.from_dict(settings.scoring)
    except LLMCheckError as exc:
        raise click.ClickException(str(exc)) from exc


def _detect(settings: Settings, quiet: bool = False) -> HardwareSnapshot:
    if not quiet:
        click.echo("Detecting hardware...", err=True)
    return detect_hardware(timeout=settings.probe_timeout)


def _detect_and_score(
    settings: Settings, quiet: bool = False
) -> tuple[HardwareSnapshot, SystemScores]:
    snapshot = _detect(settings, quiet=quiet)
    return snapshot, score_system(snapshot, _scoring_config(settings))


def _model_database(settings: Settings, online: Optional[bool] = None) -> ModelDatabase:
    """Bundled catalog, plus the HuggingFace listing unless running offline."""
    use_remote = (not settings.offline) if online is None else online
    if not use_remote:
        return ModelDatabase()

    from .sources import HuggingFaceCatalog

    return ModelDatabase(
        remote=HuggingFaceCatalog(cache_dir=settings.cache_dir),
        remote_limit=settings.remote_catalog_limit,
    )


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def _score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _styled_score(score: int) -> str:
    return click.style(f"{score:>3}/100", fg=_score_color(score))


_PRIORITY_COLORS = {"High": "red", "Medium": "yellow", "Low": "cyan"}


def _styled_priority(priority: str) -> str:
    return click.style(f"[{priority}]", fg=_PRIORITY_COLORS.get(priority), bold=True)


WELCOME_MESSAGE = """\
llmcheck - can this machine run large language models?

  Get started:
    llmcheck detect                 show detected hardware
    llmcheck score                  capability scores and bottleneck
    llmcheck models                 models that fit this machine
    llmcheck upgrade                upgrades ranked by impact

  More:
    llmcheck report -o report.txt   write a full report
    llmcheck benchmark              estimated tokens/s

  Run llmcheck <command> --help for details.
"""
