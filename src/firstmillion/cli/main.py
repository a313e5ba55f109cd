"""CLI entry point for firstmillion."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
from loguru import logger
from pydantic import ValidationError

from firstmillion import __version__
from firstmillion.analytics.metrics import return_on_investment, yearly_breakdown
from firstmillion.config.defaults import MILESTONE_AMOUNT, default_inputs, preset_inputs, preset_names
from firstmillion.config.schema import PeriodType, ProjectionInputs, RateType
from firstmillion.core.engine import project_inputs
from firstmillion.io.formatting import format_currency, format_duration, format_elapsed
from firstmillion.io.serialize import dump_inputs, dump_schedule_csv, dump_summary
from firstmillion.io.yaml_loader import load_inputs_file
from firstmillion.utils.exceptions import FirstMillionError
from firstmillion.utils.logging import configure_logging


def _base_inputs(config_path: Path | None, preset: str | None) -> ProjectionInputs:
    if config_path is not None:
        logger.info("Loading inputs from {}", config_path)
        return load_inputs_file(config_path)
    if preset is not None:
        return preset_inputs(preset)
    return default_inputs()


@click.group()
@click.version_option(version=__version__, prog_name="firstmillion")
def cli() -> None:
    """firstmillion — compound-interest projection toward the first million."""


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON or YAML file with input values. Uses defaults if not provided.",
)
@click.option("--preset", default=None, help="Start from a named preset instead of the defaults.")
@click.option("--initial", default=None, type=float, help="Initial deposit (R$).")
@click.option("--monthly", default=None, type=float, help="Monthly contribution (R$).")
@click.option("--rate", default=None, type=float, help="Interest rate in percent.")
@click.option(
    "--rate-type",
    default=None,
    type=click.Choice([t.value for t in RateType]),
    help="Whether the rate is yearly or monthly.",
)
@click.option("--period", default=None, type=float, help="Length of the horizon.")
@click.option(
    "--period-type",
    default=None,
    type=click.Choice([t.value for t in PeriodType]),
    help="Unit of the horizon.",
)
@click.option("--yearly", is_flag=True, help="Print the year-by-year table.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a JSON summary (.json) or the monthly schedule (.csv).",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def run(
    config_path: Path | None,
    preset: str | None,
    initial: float | None,
    monthly: float | None,
    rate: float | None,
    rate_type: str | None,
    period: float | None,
    period_type: str | None,
    yearly: bool,
    output_path: Path | None,
    verbose: bool,
) -> None:
    """Project the balance and report when it reaches R$ 1 million."""
    configure_logging(verbose)

    overrides: dict[str, Any] = {
        key: value
        for key, value in {
            "initial": initial,
            "monthly": monthly,
            "rate": rate,
            "rate_type": rate_type,
            "period": period,
            "period_type": period_type,
        }.items()
        if value is not None
    }

    try:
        base = _base_inputs(config_path, preset)
        inputs = ProjectionInputs.model_validate(
            {**base.model_dump(mode="json"), **overrides}
        )
    except (FirstMillionError, ValidationError) as exc:
        raise click.ClickException(str(exc)) from exc

    result = project_inputs(inputs)
    summary = result.summary

    click.echo(
        f"Projecting {result.n_months} months: {format_currency(inputs.initial)} initial, "
        f"{format_currency(inputs.monthly)}/month at {inputs.rate:g}% {inputs.rate_type.value}"
    )
    click.echo(f"\nTotal final:     {format_currency(summary.total_amount)}")
    click.echo(f"Total investido: {format_currency(summary.total_invested)}")
    click.echo(f"Total em juros:  {format_currency(summary.total_interest)}")
    click.echo(f"Rentabilidade:   {return_on_investment(summary):.0f}%")

    milestone = format_currency(MILESTONE_AMOUNT)
    if summary.months_to_million is not None:
        click.echo(f"\n{milestone} atingido em {format_duration(summary.months_to_million)}")
    else:
        click.echo(f"\n{milestone} não atingido no período")

    if yearly:
        click.echo("")
        click.echo(f"{'Tempo':<16s} {'Investido':>20s} {'Juros':>20s} {'Total':>20s}")
        for row in yearly_breakdown(result.snapshots):
            click.echo(
                f"{format_elapsed(row.month):<16s} "
                f"{format_currency(row.invested):>20s} "
                f"{format_currency(row.interest):>20s} "
                f"{format_currency(row.total):>20s}"
            )

    if output_path is not None:
        if output_path.suffix.lower() == ".csv":
            output_path.write_text(dump_schedule_csv(result.snapshots))
        else:
            output_path.write_text(dump_summary(summary, inputs))
        logger.info("Wrote {}", output_path)
        click.echo(f"\nResults written to {output_path}")


@cli.command()
@click.option(
    "--preset",
    default=None,
    type=click.Choice(preset_names()),
    help="Print a preset instead of the defaults.",
)
def config(preset: str | None) -> None:
    """Print an inputs document usable with ``run --config``."""
    inputs = preset_inputs(preset) if preset is not None else default_inputs()
    click.echo(dump_inputs(inputs))


if __name__ == "__main__":
    cli()
