#!/usr/bin/env python3
"""
CLI for the Sales Dashboard data

Runs the same queries as the HTTP API directly against a data file.

Commands:
    states       - List distinct values of a filter dimension
    date-range   - Show min/max order date for a state
    summary      - Print the dashboard summary JSON

Usage:
    python cli.py states
    python cli.py states --field category
    python cli.py date-range Texas
    python cli.py summary --state Texas --from 2016-01-01 --to 2016-12-31
    python cli.py --data data/other.csv summary
"""

import json
import sys

import click

from config import Config
from constants import DEFAULT_DISTINCT_FIELD, DISTINCT_VALUE_FIELDS
from api.contracts.pydantic_models import normalize_region
from schemas.api_contract import serialize_date_bounds, serialize_summary
from services.data_loader import load_sales_records
from services.exceptions import SalesAnalyticsError
from services.sales_service import SalesQueryService


def _echo_json(payload):
    click.echo(json.dumps(payload, indent=2))


@click.group()
@click.version_option(version="1.0.0", prog_name="sales-cli")
@click.option(
    "--data", "data_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Sales data file (JSON or CSV). Defaults to SALES_DATA_PATH.",
)
@click.pass_context
def cli(ctx, data_path):
    """Sales Dashboard CLI - query the sales dataset from the terminal."""
    path = data_path or Config.SALES_DATA_PATH
    ctx.obj = SalesQueryService(
        loader=lambda: load_sales_records(path),
        top_n=Config.TOP_PRODUCTS_LIMIT,
    )


@cli.command("states")
@click.option(
    "--field",
    type=click.Choice(DISTINCT_VALUE_FIELDS),
    default=DEFAULT_DISTINCT_FIELD,
    show_default=True,
    help="Dimension to list",
)
@click.pass_obj
def states(service, field):
    """List distinct values of FIELD, one per line."""
    for value in service.list_distinct_values(field):
        click.echo(value)


@cli.command("date-range")
@click.argument("state")
@click.pass_obj
def date_range(service, state):
    """
    Show the order-date bounds for STATE.

    STATE may be "All States" for the whole dataset.
    """
    try:
        bounds = service.get_date_bounds(normalize_region(state, Config.ALL_STATES_SENTINEL))
    except SalesAnalyticsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    _echo_json(serialize_date_bounds(bounds))


@cli.command("summary")
@click.option("--state", default=None, help="State filter (omit for all states)")
@click.option("--from", "date_from", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Start date, inclusive (YYYY-MM-DD)")
@click.option("--to", "date_to", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="End date, inclusive (YYYY-MM-DD)")
@click.pass_obj
def summary(service, state, date_from, date_to):
    """Print the dashboard summary as JSON."""
    try:
        result = service.get_summary(
            state=normalize_region(state, Config.ALL_STATES_SENTINEL),
            date_from=date_from.date() if date_from else None,
            date_to=date_to.date() if date_to else None,
        )
    except SalesAnalyticsError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    _echo_json(serialize_summary(result))


if __name__ == "__main__":
    cli()
