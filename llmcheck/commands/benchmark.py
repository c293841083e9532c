"""llmcheck benchmark -- estimated throughput from detected specs."""

from __future__ import annotations

import click

from llmcheck.benchmark import run_benchmark
from llmcheck.cli_helpers import _detect, _echo_json, _load_settings


def register(cli: click.Group) -> None:
    @cli.command()
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    def benchmark(as_json: bool) -> None:
        """Estimate tokens/s for common model sizes (no model is run)."""
        settings = _load_settings()
        snapshot = _detect(settings, quiet=as_json)
        result = run_benchmark(snapshot)
        if as_json:
            _echo_json(result.to_dict())
            return

        click.echo(click.style("Estimated performance", bold=True))
        click.echo(f"  CPU single-core:   {result.cpu_single_core_score:.0f}")
        click.echo(f"  CPU multi-core:    {result.cpu_multi_core_score:.0f}")
        click.echo(f"  Memory bandwidth:  {result.memory_bandwidth_gbps:.1f} GB/s")
        click.echo(f"  vs. reference:     {result.comparison_to_reference:.1f}%")
        click.echo(click.style("\nTokens/s (estimate)", bold=True))
        for size, tps in result.tokens_per_second.items():
            click.echo(f"  {size:<5} {tps:>8.1f}")
        click.echo(
            click.style(
                "\nFigures are derived from hardware specs, not measured inference.",
                dim=True,
            )
        )
