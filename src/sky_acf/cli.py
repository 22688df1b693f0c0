"""CLI entrypoint for sky-acf."""

from __future__ import annotations

import logging

import click
from rich.console import Console

from sky_acf.config import LOG_LEVELS, load_config
from sky_acf.geo import angular_distance
from sky_acf.histogram import ENGINES
from sky_acf.parsers import CatalogParseError, load_catalog
from sky_acf.report import build_table, write_report

console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", default=None, type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help="Logging level (default: $ACF_LOG_LEVEL or WARNING).")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Sky ACF: angular two-point correlation pair counts for RA/Dec catalogs."""
    try:
        config = load_config(log_level=log_level)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    ctx.obj = config


@cli.command()
@click.argument("datafile", type=click.Path(exists=True, dir_okay=False))
@click.option("--bins", "num_bins", type=click.IntRange(min=1), default=None, help="Number of distance bins.")
@click.option("--max-distance", type=click.FloatRange(min=0, min_open=True), default=None,
              help="Exclusive upper bound on separations, in degrees.")
@click.option("--output", default=None, help="Report file to append results to.")
@click.option("--no-output", is_flag=True, help="Do not append to the report file.")
@click.option("--engine", type=click.Choice(sorted(ENGINES)), default=None, help="Pair-counting engine.")
@click.option("--lenient", is_flag=True, help="Skip unparseable lines instead of failing.")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON instead of a table.")
@click.pass_obj
def run(config, datafile: str, num_bins: int | None, max_distance: float | None, output: str | None,
        no_output: bool, engine: str | None, lenient: bool, as_json: bool):
    """Compute the pair-count histogram for DATAFILE (two columns: RA Dec, degrees)."""
    num_bins = num_bins or config.num_bins
    max_distance = max_distance or config.max_distance_deg
    report_path = output or config.report_path
    compute = ENGINES[engine or config.engine]

    try:
        catalog = load_catalog(datafile, strict=not lenient)
    except CatalogParseError as exc:
        raise click.ClickException(str(exc)) from exc

    if not as_json:
        click.echo(f"Calculating angular correlation function for {len(catalog)} points...")

    try:
        result = compute(catalog, num_bins=num_bins, max_distance_deg=max_distance)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(result.to_json())
    else:
        console.print(build_table(result))
        click.echo(f"Total pairs counted: {result.counted_pairs}")
        click.echo(f"Expected total pairs (n(n-1)/2): {result.expected_pairs}")
        click.echo(f"Time taken (CPU): {result.elapsed_seconds:g} seconds")

    if not no_output:
        try:
            with open(report_path, "a", encoding="utf-8") as sink:
                write_report(result, datafile, sink)
        except OSError as exc:
            raise click.ClickException(f"Cannot write report to {report_path}: {exc.strerror}") from exc
        logger.info("Appended results for %s to %s", datafile, report_path)


@cli.command()
@click.argument("ra1", type=float)
@click.argument("dec1", type=float)
@click.argument("ra2", type=float)
@click.argument("dec2", type=float)
def distance(ra1: float, dec1: float, ra2: float, dec2: float):
    """Print the angular separation (degrees) between two RA/Dec positions."""
    click.echo(f"{angular_distance(ra1, dec1, ra2, dec2):.10g}")
