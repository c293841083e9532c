"""
llmcheck command-line interface.

Usage::

    llmcheck detect
    llmcheck detect --json
    llmcheck score
    llmcheck models --family llama
    llmcheck models --all --offline
    llmcheck upgrade
    llmcheck report --format json --output report.json
    llmcheck benchmark
"""

from __future__ import annotations

import logging

import click

from llmcheck import __version__
from llmcheck.cli_helpers import WELCOME_MESSAGE


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="llmcheck")
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v, -vv).")
@click.pass_context
def main(ctx: click.Context, verbose: int) -> None:
    """llmcheck - hardware capability checker for local LLMs."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        click.echo(WELCOME_MESSAGE)


# ---------------------------------------------------------------------------
# Register command modules
# ---------------------------------------------------------------------------

from llmcheck.commands import (  # noqa: E402
    benchmark,
    detect,
    models,
    report,
    score,
    upgrade,
)

for _mod in [detect, score, models, upgrade, report, benchmark]:
    _mod.register(main)
