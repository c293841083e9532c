"""llmcheck upgrade -- hardware and software upgrades ranked by impact."""

from __future__ import annotations

import click

from llmcheck.advisor import advise
from llmcheck.cli_helpers import (
    _detect_and_score,
    _echo_json,
    _load_settings,
    _styled_priority,
)


def register(cli: click.Group) -> None:
    @cli.command()
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    def upgrade(as_json: bool) -> None:
        """Suggest upgrades, starting with the primary bottleneck."""
        settings = _load_settings()
        snapshot, scores = _detect_and_score(settings, quiet=as_json)
        recs = advise(snapshot, scores)
        if as_json:
            _echo_json([r.to_dict() for r in recs])
            return

        click.echo(f"Primary bottleneck: {scores.bottleneck_summary}\n")
        if not recs:
            click.echo(click.style("No upgrades needed for local LLM work.", fg="green"))
            return
        for i, rec in enumerate(recs, 1):
            click.echo(
                f"{i}. {_styled_priority(rec.priority)} {rec.component}: {rec.recommended_specs}"
            )
            click.echo(f"     Current:  {rec.current_specs}")
            if rec.specific_product:
                click.echo(f"     Example:  {rec.specific_product}")
            click.echo(f"     Impact:   +{rec.score_improvement} ({rec.impact_description})")
            click.echo(f"     Cost:     ~${rec.estimated_cost}")
            click.echo(f"     Why:      {rec.reason}")
