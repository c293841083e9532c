"""llmcheck score -- component and workload scores."""

from __future__ import annotations

import click

from llmcheck.cli_helpers import _detect_and_score, _echo_json, _load_settings, _styled_score


def register(cli: click.Group) -> None:
    @cli.command()
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    def score(as_json: bool) -> None:
        """Score this machine for LLM inference, training and fine-tuning."""
        settings = _load_settings()
        snapshot, scores = _detect_and_score(settings, quiet=as_json)
        if as_json:
            _echo_json(scores.to_dict())
            return

        click.echo(click.style("Component scores", bold=True))
        for label, value in scores.breakdown.ordered():
            click.echo(f"  {label:<12}{_styled_score(value)}")

        click.echo(click.style("\nWorkloads", bold=True))
        click.echo(
            f"  {'Inference':<12}{_styled_score(scores.inference_score)}  "
            f"{scores.inference_capability}"
        )
        click.echo(
            f"  {'Training':<12}{_styled_score(scores.training_score)}  "
            f"{scores.training_capability}"
        )
        click.echo(
            f"  {'Fine-tuning':<12}{_styled_score(scores.fine_tuning_score)}  "
            f"{scores.fine_tuning_capability}"
        )

        click.echo("")
        click.echo(f"  System tier:        {click.style(scores.system_tier, bold=True)}")
        click.echo(f"  Primary bottleneck: {scores.bottleneck_summary}")
        click.echo(f"  Recommended size:   {scores.recommended_model_size}")
