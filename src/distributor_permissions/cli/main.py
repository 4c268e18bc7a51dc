"""CLI entry point for distributor-permissions.

Invoked as::

    distributor-perms [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m distributor_permissions.cli.main

Commands
--------
- evaluate   Evaluate every distributor against a location CSV
- check      Show each distributor's decision for a single location code
- version    Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from distributor_permissions.catalog.loader import LocationLoader, LocationSourceError
from distributor_permissions.config.config_loader import ConfigLoader, RunConfig
from distributor_permissions.distributors.distributor import (
    DEFAULT_DISTRIBUTORS,
    Distributor,
)
from distributor_permissions.distributors.distributor_loader import DistributorLoader
from distributor_permissions.evaluation.aggregator import ResultAggregator
from distributor_permissions.evaluation.engine import EvaluationEngine
from distributor_permissions.reporting.renderer import OUTPUT_FORMATS, ReportRenderer

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="distributor-permissions")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Distributor permission CLI: evaluate who may serve which locations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from distributor_permissions import __version__

    console.print(
        Panel(
            f"[bold]distributor-permissions[/bold]  v[cyan]{__version__}[/cyan]\n"
            "Hierarchical include/exclude permissions for distributors.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# evaluate
# ---------------------------------------------------------------------------


@cli.command(name="evaluate")
@click.option(
    "--locations",
    "-l",
    "locations_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Location CSV (city code, province code, country code, names).",
)
@click.option(
    "--distributors",
    "-d",
    "distributors_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Distributor YAML. Built-in distributors are used when omitted.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Run configuration YAML.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format. [default: text]",
)
@click.option("--workers", "-w", type=click.IntRange(min=1), default=None, help="Thread pool size.")
@click.option("--no-header", is_flag=True, help="Treat the first CSV row as data.")
def evaluate_command(
    locations_path: str | None,
    distributors_path: str | None,
    config_path: str | None,
    output_format: str | None,
    workers: int | None,
    no_header: bool,
) -> None:
    """Evaluate every distributor against every location."""
    try:
        config = _load_config(config_path)
        source = locations_path or (
            str(config.locations_path) if config.locations_path else None
        )
        if source is None:
            raise click.UsageError("No location source given; pass --locations.")

        distributors = _resolve_distributors(distributors_path, config)
        skip_header = config.skip_header and not no_header
        locations = LocationLoader(skip_header=skip_header).load(source)

        aggregator = ResultAggregator(max_workers=workers or config.max_workers)
        report = aggregator.aggregate(distributors, locations)
    except (LocationSourceError, FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    rendered = ReportRenderer().render(report, output_format or config.output_format)
    click.echo(rendered)


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("code")
@click.option(
    "--distributors",
    "-d",
    "distributors_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Distributor YAML. Built-in distributors are used when omitted.",
)
def check_command(code: str, distributors_path: str | None) -> None:
    """Show each distributor's decision for a single location CODE."""
    try:
        distributors = _resolve_distributors(distributors_path, RunConfig())
    except (FileNotFoundError, ValueError) as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    engine = EvaluationEngine()
    table = Table(title=f"Permissions for {code}", box=box.SIMPLE)
    table.add_column("Distributor", style="cyan", no_wrap=True)
    table.add_column("Rule")
    table.add_column("Allowed", no_wrap=True)
    for distributor in distributors:
        allowed = engine.check(distributor, code)
        verdict = "[green]ALLOWED[/green]" if allowed else "[red]DENIED[/red]"
        table.add_row(distributor.name, distributor.rule.describe(), verdict)
    console.print(table)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_config(config_path: str | None) -> RunConfig:
    loader = ConfigLoader()
    if config_path is None:
        return loader.defaults()
    return loader.load(Path(config_path))


def _resolve_distributors(
    distributors_path: str | None,
    config: RunConfig,
) -> tuple[Distributor, ...]:
    loader = DistributorLoader()
    if distributors_path is not None:
        return loader.load(distributors_path)
    if config.distributors:
        return loader.load_from_entries(config.distributors)
    logger.info("Using %d built-in distributors", len(DEFAULT_DISTRIBUTORS))
    return DEFAULT_DISTRIBUTORS


if __name__ == "__main__":
    cli()
