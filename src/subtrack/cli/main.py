#!/usr/bin/env python3
"""
Main CLI Entry Point for SubTrack

Provides a command-line view of subscription costs, upcoming renewals
and insights.
"""

import csv
import logging
import os
from datetime import datetime
from pathlib import Path

import click

from ..core.config import get_config, reset_config
from ..core.currency import format_dollars, format_percentage
from ..core.dates import CalendarDate, InvalidDateFormat, parse_local_date, today
from ..core.json_utils import write_json
from ..renewals import AggregatorConfig, RenewalAggregator, next_renewal_label, renewal_label
from ..storage import load_subscriptions

logger = logging.getLogger(__name__)


def _parse_today(ctx: click.Context, param: click.Parameter, value: str | None) -> CalendarDate:
    if value is None:
        return today()
    try:
        return parse_local_date(value)
    except InvalidDateFormat as e:
        raise click.BadParameter(str(e)) from e


file_option = click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Subscriptions JSON file (default: configured subscriptions file)",
)
today_option = click.option(
    "--today",
    "today_date",
    callback=_parse_today,
    help="Reference date (YYYY-MM-DD), defaults to the current local date",
)


def _build_aggregator(file_path: Path | None, today_date: CalendarDate) -> RenewalAggregator:
    config = get_config()
    try:
        subscriptions = load_subscriptions(file_path)
    except (FileNotFoundError, ValueError, KeyError) as e:
        raise click.ClickException(f"Could not load subscriptions: {e}") from e
    return RenewalAggregator(subscriptions, today_date, AggregatorConfig.from_config(config))


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    SubTrack - Subscription Renewal Tracker

    Totals, renewal timelines and insights for your subscriptions.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["SUBTRACK_ENV"] = config_env
        reset_config()

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("subtrack").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from subtrack import __version__

    click.echo(f"SubTrack v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Subscriptions File: {config_obj.subscriptions_file}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Timeline Horizon: {config_obj.renewals.timeline_horizon_days} days")
    click.echo(f"  Upcoming Window: {config_obj.renewals.upcoming_window_days} days")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@file_option
@today_option
@click.option("--horizon", type=click.IntRange(min=0), help="Timeline horizon in days (default: configured)")
def stats(file_path: Path | None, today_date: CalendarDate, horizon: int | None) -> None:
    """
    Show cost statistics, the renewal timeline and insights.

    Examples:
      subtrack stats
      subtrack stats --file subs.json --today 2025-12-10 --horizon 60
    """
    aggregator = _build_aggregator(file_path, today_date)
    horizon_days = aggregator.config.horizon_days if horizon is None else horizon

    try:
        distribution = aggregator.billing_cycle_distribution()
        next_date = aggregator.next_renewal_date()
        timeline = aggregator.renewal_timeline(horizon_days)
        categories = aggregator.category_sorted()
        insights = aggregator.insights()
    except InvalidDateFormat as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"[SUMMARY] {len(aggregator.subscriptions)} subscriptions as of {aggregator.today}")
    click.echo(f"   Monthly Total: {format_dollars(aggregator.total_monthly_cost())}")
    click.echo(f"   Yearly Total: {format_dollars(aggregator.total_yearly_cost())}")
    click.echo(f"   Average Monthly: {format_dollars(aggregator.average_monthly_cost())}")
    click.echo(f"   Billing: {distribution.monthly} monthly, {distribution.yearly} yearly")
    click.echo(f"   Next Renewal: {next_renewal_label(next_date, aggregator.today)}")

    click.echo(f"\n[RENEWALS] Upcoming Renewals ({horizon_days} days)")
    if timeline.is_empty:
        click.echo(f"   No renewals in the next {horizon_days} days")
    for title, bucket in [
        ("This Week", timeline.this_week),
        ("Next Week", timeline.next_week),
        ("This Month", timeline.this_month),
    ]:
        if not bucket:
            continue
        click.echo(f"   {title}:")
        for sub in bucket:
            click.echo(
                f"     {sub.name:<24} {format_dollars(sub.cost):>10}  {renewal_label(sub.renewal_date, aggregator.today)}"
            )

    if categories:
        click.echo("\n[CATEGORIES] Monthly Spend by Category")
        for entry in categories:
            click.echo(
                f"   {entry.category:<24} {format_dollars(entry.total):>10}  {format_percentage(entry.percentage):>4}"
            )

    if insights:
        click.echo("\n[INSIGHTS]")
        for insight in insights:
            click.echo(f"   ({insight.priority.value}) {insight.message}")


@main.command()
@file_option
@today_option
@click.option("--days", type=click.IntRange(min=0), help="Window in days (default: configured)")
def upcoming(file_path: Path | None, today_date: CalendarDate, days: int | None) -> None:
    """
    List renewals due within a window, soonest first.

    Example:
      subtrack upcoming --days 14
    """
    aggregator = _build_aggregator(file_path, today_date)
    window = aggregator.config.upcoming_days if days is None else days

    try:
        renewals = aggregator.upcoming_renewals(window)
    except InvalidDateFormat as e:
        raise click.ClickException(str(e)) from e

    if not renewals:
        click.echo(f"No renewals in the next {window} days")
        return

    for sub in renewals:
        click.echo(
            f"{renewal_label(sub.renewal_date, aggregator.today):<10} {sub.name:<24} {format_dollars(sub.cost):>10}"
        )


@main.command()
@file_option
@today_option
@click.option("--horizon", type=click.IntRange(min=0), help="Timeline horizon in days (default: configured)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "csv"]),
    default="json",
    help="Output format (default: json)",
)
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Output file path")
@click.pass_context
def report(
    ctx: click.Context,
    file_path: Path | None,
    today_date: CalendarDate,
    horizon: int | None,
    output_format: str,
    output: Path | None,
) -> None:
    """
    Write a statistics report.

    Examples:
      subtrack report
      subtrack report --format csv --output categories.csv
    """
    aggregator = _build_aggregator(file_path, today_date)
    if horizon is not None:
        aggregator.config.horizon_days = horizon

    if output is None:
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        output = ctx.obj["config"].output_dir / f"{timestamp}_subscription_report.{output_format}"

    try:
        summary = aggregator.summary()
    except InvalidDateFormat as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        write_json(output, summary)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["category", "monthly_total", "percentage"])
            for entry in aggregator.category_sorted():
                writer.writerow([entry.category, format_dollars(entry.total), format_percentage(entry.percentage)])

    logger.info(f"Wrote {output_format} report to {output}")
    click.echo(f"Report saved to: {output}")


if __name__ == "__main__":
    main()
