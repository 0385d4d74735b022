"""CLI interface for ETHPH Academy.

Command-line tool for serving the learning site.
"""

import logging
import sys
from pathlib import Path

import click

from ethph_academy.config import Config


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@click.group()
def cli() -> None:
    """ETHPH Academy - learn Solidity and smart contract development."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover academy.toml)",
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
    "--compile-delay",
    type=click.FloatRange(min=0),
    default=None,
    help="Simulated playground compile time in seconds (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    compile_delay: float | None,
    verbose: bool,
) -> None:
    """Start the academy server."""
    from ethph_academy.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        compile_delay=compile_delay,
        log_level="DEBUG" if verbose else None,
    )

    logging.basicConfig(
        level=config.logging.level_number,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    if config.config_path is not None:
        click.echo(f"Configuration: {config.config_path}")
    click.echo(f"Site name: {config.site.name}")
    click.echo(
        f"Playground: compile delay {config.playground.compile_delay}s, "
        f"failure rate {config.playground.failure_rate:.0%}",
    )

    run_server(config)


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover academy.toml)",
)
def routes(config_path: Path | None) -> None:
    """List the site's page routes."""
    from ethph_academy.core.catalog import DEFAULT_NAVIGATION
    from ethph_academy.core.navigation import NavigationTree
    from ethph_academy.pages import create_router

    _load_config(config_path)
    navigation = NavigationTree(DEFAULT_NAVIGATION)

    for route in create_router():
        section = navigation.section_for(route.path)
        line = f"{route.path:<40} {route.page.title}"
        if section is not None:
            line += f" ({section.title})"
        click.echo(line)


if __name__ == "__main__":
    cli()
