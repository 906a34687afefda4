"""CLI interface for Approute.

Command-line tool for inspecting route segments and serving the routes API.
"""

import json
import logging
import sys
from pathlib import Path

import click

from approute.config import PAGE_TYPE_CHOICES, Config
from approute.core.errors import SegmentError
from approute.core.page import AppPage


@click.group()
def cli() -> None:
    """Approute - route segments for directory-based routers."""


@cli.command()
@click.argument("path")
@click.option(
    "--type",
    "page_type",
    type=click.Choice(PAGE_TYPE_CHOICES),
    default=None,
    help="Terminal marker to append (overrides config, default: page)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print page and path segments as JSON",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover approute.toml)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def parse(
    path: str,
    page_type: str | None,
    as_json: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Parse a route PATH into its page and URL path."""
    _setup_logging(verbose)
    config = _load_config(config_path).with_overrides(default_page_type=page_type)
    marker = config.routes.default_page_type

    try:
        page = AppPage.parse_path(path)
        if marker is not None:
            page.append(marker)
    except SegmentError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    app_path = page.to_path()
    if as_json:
        payload = {
            "page": page.render(),
            "path": app_path.render(),
            "segments": page.to_dict()["segments"],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Page: {page}")
    click.echo(f"Path: {app_path}")


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover approute.toml)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the routes API server."""
    from approute.server import run_server

    _setup_logging(verbose)
    config = _load_config(config_path).with_overrides(host=host, port=port)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    run_server(config)


def _load_config(config_path: Path | None) -> Config:
    """Load config, exiting with an error message if it is invalid."""
    try:
        return Config.load(config_path)
    except ValueError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(1)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


if __name__ == "__main__":
    cli()
