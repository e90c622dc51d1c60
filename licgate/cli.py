"""
Command-line interface for licgate.
"""

from __future__ import annotations

from pathlib import Path

import click

from licgate.app.gate import bootstrap
from licgate.app.server import start_server
from licgate.common import paths, setup_logger
from licgate.common.exceptions import LicgateError
from licgate.common.logging_utils import LOG_LEVEL_NAMES, level_from_name
from licgate.license.verifier import LicenseVerifier


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVEL_NAMES, case_sensitive=False),
    default=None,
    help="Logging level (default: INFO)",
)
def cli(log_level: str | None) -> None:
    """licgate: license-gated application startup"""
    setup_logger(level_from_name(log_level))


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to a JSON config file",
)
def app(config_path: Path | None) -> None:
    """Resolve configuration, check the license and start the app"""
    try:
        options = bootstrap(config_path)
    except LicgateError as err:
        raise click.ClickException(err.message) from err
    start_server(options)


@cli.command()
@click.argument("license_path", type=click.Path(path_type=Path, dir_okay=False))
def verify(license_path: Path) -> None:
    """Verify a license file against the embedded key"""
    try:
        outcome = LicenseVerifier().verify_path(license_path)
    except LicgateError as err:
        raise click.ClickException(err.message) from err
    if not outcome.is_verified:
        msg = "failed to verify license"
        raise click.ClickException(msg)
    click.echo("license verified")


@cli.command(name="paths")
def show_paths() -> None:
    """Show the user directories and default database url"""
    try:
        click.echo(f"data: {paths.data_dir_default()}")
        click.echo(f"cache: {paths.cache_dir_default()}")
        click.echo(f"database: {paths.database_url_default()}")
    except LicgateError as err:
        raise click.ClickException(err.message) from err


if __name__ == "__main__":
    cli()
