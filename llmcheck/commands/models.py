"""llmcheck models -- catalog models that fit this machine."""

from __future__ import annotations

from typing import Optional

import click

from llmcheck.cli_helpers import _detect, _echo_json, _load_settings, _model_database
from llmcheck.models import AnnotatedModel, match_models
from llmcheck.models.matcher import annotate, match_one

_BUCKET_COLORS = {
    "Perfect": "green",
    "Good": "cyan",
    "Possible": "yellow",
    "Not Recommended": "red",
}


def _print_model(annotated: AnnotatedModel) -> None:
    model = annotated.model
    bucket = click.style(f"{annotated.bucket:<15}", fg=_BUCKET_COLORS.get(annotated.bucket))
    variant = ""
    if annotated.best_option is not None:
        variant = f"{annotated.best_option.format} on {annotated.runs_on}"
    click.echo(
        f"  {bucket} {annotated.compatibility_score:>3}  {model.name:<40} "
        f"{model.parameter_size:>6}  {variant}"
    )


def register(cli: click.Group) -> None:
    @cli.command()
    @click.option("--family", default=None, help="Only show one model family (e.g. llama).")
    @click.option(
        "--all", "show_all", is_flag=True, help="Include models that will not run here."
    )
    @click.option(
        "--online/--offline",
        default=None,
        help="Merge the HuggingFace listing (default: on unless offline in config).",
    )
    @click.option("--limit", default=20, show_default=True, help="Max models to show.")
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    def models(
        family: Optional[str],
        show_all: bool,
        online: Optional[bool],
        limit: int,
        as_json: bool,
    ) -> None:
        """List models this machine can run, best match first."""
        settings = _load_settings()
        snapshot = _detect(settings, quiet=as_json)
        database = _model_database(settings, online=online)
        candidates = database.get_by_family(family) if family else database.get_all()

        if show_all:
            results = [annotate(m, match_one(snapshot, m)) for m in candidates]
            results.sort(key=lambda a: a.compatibility_score, reverse=True)
        else:
            results = match_models(snapshot, candidates)
        shown = results[:limit] if limit > 0 else results

        if as_json:
            _echo_json([a.to_dict() for a in shown])
            return
        if not shown:
            click.echo("No compatible models found for this hardware.")
            return

        click.echo(
            click.style(
                f"{len(results)} model(s) for {snapshot.gpu.vram_gb:g} GB VRAM / "
                f"{snapshot.memory.total_gb:g} GB RAM",
                bold=True,
            )
        )
        for annotated in shown:
            _print_model(annotated)
        if len(shown) < len(results):
            click.echo(f"  ... {len(results) - len(shown)} more, use --limit to show them")
