#!/usr/bin/env python3
"""
Main CLI Entry Point for Medexpense

Provides a unified command-line interface over category search, resolution
and Schedule A deduction tools.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config


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
    Medexpense - Medical Expense Classification and Deductions

    Search the IRS Publication 502 medical expense taxonomy, resolve
    categories to IRS reference tags, and compute Schedule A deductions.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["MEDEXPENSE_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("medexpense").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from medexpense import __author__, __version__

    click.echo(f"Medexpense v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Max Search Results: {config_obj.search.max_results}")
    click.echo(f"  AGI Threshold Rate: {config_obj.deductions.agi_threshold_rate}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .deductions import schedule_a, threshold  # noqa: E402
from .taxonomy import categories, resolve, search  # noqa: E402

main.add_command(categories)
main.add_command(search)
main.add_command(resolve)
main.add_command(threshold)
main.add_command(schedule_a)


if __name__ == "__main__":
    main()
