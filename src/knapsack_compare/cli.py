"""
Command line interface for knapsack-compare.

Generates a random instance, solves it with greedy and DP and prints the comparison.
"""

import logging
from pathlib import Path

import click

from knapsack_compare import __version__
from knapsack_compare.config.loader import config_to_dict, load_config, validate_config_file
from knapsack_compare.eval.comparison import compare_solvers
from knapsack_compare.eval.reporting import export_items_to_csv, export_report_to_json, format_report
from knapsack_compare.utils.error_handler import handle_cli_errors
from knapsack_compare.utils.logger import log_run_config, setup_logger


@click.group()
@click.version_option(version=__version__)
def main():
    """
    Knapsack 0/1: greedy by profit vs. dynamic programming.

    Examples:
        knapsack-compare solve --capacity 50 --items 10
        knapsack-compare solve --capacity 200 --items 40 --seed 7 --json out/run.json
        knapsack-compare check-config configs/default.yaml
    """
    pass


@main.command()
@click.option("--capacity", type=click.IntRange(min=0), required=True, help="Knapsack capacity")
@click.option(
    "--items", "n_items", type=click.IntRange(min=0), required=True, help="Number of items"
)
@click.option("--seed", type=click.IntRange(0, 2**32 - 1), help="Random seed (overrides config)")
@click.option("--config", type=click.Path(exists=True), help="Path to YAML configuration file")
@click.option("--min-value", type=int, help="Smallest weight/profit (overrides config)")
@click.option("--max-value", type=int, help="Exclusive upper bound (overrides config)")
@click.option("--no-timing", is_flag=True, help="Do not measure solver time")
@click.option("--json", "json_path", type=click.Path(), help="Write the report as JSON")
@click.option("--csv", "csv_path", type=click.Path(), help="Write the item table as CSV")
@click.option("--verbose", is_flag=True, help="Log at INFO level")
@click.option("--debug", is_flag=True, help="Show full tracebacks and DEBUG logs")
@handle_cli_errors()
def solve(
    capacity,
    n_items,
    seed,
    config,
    min_value,
    max_value,
    no_timing,
    json_path,
    csv_path,
    verbose,
    debug,
):
    """Solve a random instance with both algorithms and print the results."""
    # Unset options are None and keep the file's value
    overrides = {
        "seed": seed,
        "generator": {"min_value": min_value, "max_value": max_value},
        "timing": {"enabled": False} if no_timing else {},
    }
    run_config = load_config(config, overrides=overrides)

    level = logging.DEBUG if debug else logging.INFO if verbose else run_config.logging.level
    log_file = Path(run_config.logging.log_file) if run_config.logging.log_file else None
    logger = setup_logger(level=level, log_file=log_file)
    log_run_config(logger, config_to_dict(run_config))

    report = compare_solvers(capacity, n_items, config=run_config)
    click.echo(format_report(report))

    if json_path:
        click.echo(f"Report saved to {export_report_to_json(report, json_path)}")
    if csv_path:
        click.echo(f"Items exported to {export_items_to_csv(report, csv_path)}")


@main.command("check-config")
@click.argument("config_path", type=click.Path())
def check_config(config_path):
    """Validate a YAML configuration file."""
    is_valid, message = validate_config_file(config_path)
    click.secho(message, fg="green" if is_valid else "red", err=not is_valid)
    if not is_valid:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
