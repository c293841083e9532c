"""llmcheck report -- full capability report as text or JSON."""

from __future__ import annotations

from typing import Optional

import click

from llmcheck.advisor import advise
from llmcheck.cli_helpers import _detect_and_score, _load_settings, _model_database
from llmcheck.errors import ReportExportError
from llmcheck.report import REPORT_FORMATS, render_report, save_report

# The text report lists this many models.
REPORT_MODEL_LIMIT = 10


def register(cli: click.Group) -> None:
    @cli.command()
    @click.option(
        "--format",
        "fmt",
        type=click.Choice(sorted(REPORT_FORMATS)),
        default="text",
        show_default=True,
    )
    @click.option("--output", "-o", default=None, help="Write the report to a file.")
    @click.option("--offline", is_flag=True, help="Use the bundled catalog only.")
    def report(fmt: str, output: Optional[str], offline: bool) -> None:
        """Detect, score, match and advise in one report."""
        settings = _load_settings()
        snapshot, scores = _detect_and_score(settings, quiet=output is None)
        database = _model_database(settings, online=False if offline else None)
        models = database.get_recommended(snapshot)[:REPORT_MODEL_LIMIT]
        upgrades = advise(snapshot, scores)

        try:
            content = render_report(fmt, snapshot, scores, models, upgrades)
            if output is None:
                click.echo(content, nl=False)
                return
            path = save_report(content, output)
        except ReportExportError as exc:
            raise click.ClickException(str(exc)) from exc
        click.echo(f"Report written to {path}")
