"""Command-line interface for petfinder."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click

from petfinder.config import CONFIG_DIR_NAME, DEFAULT_CONFIG_TOML, Config, tomllib
from petfinder.seed import seeded_shelter
from petfinder.session import (
    LISTING_HEADER,
    NONE_AVAILABLE,
    Session,
    no_results_message,
    render_pets,
)


def _load_config(path: str | None) -> Config:
    root = Path(path).resolve() if path else None
    try:
        return Config.load(root) if root else Config.load_from_cwd()
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid config file: {exc}") from exc


def _configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(invoke_without_command=True)
@click.option("--path", default=None, help="Project root (default: auto-detect)")
@click.pass_context
def main(ctx: click.Context, path: str | None):
    """petfinder — find and adopt a pet from the shelter."""
    config = _load_config(path)
    _configure_logging(config)
    ctx.obj = config
    if ctx.invoked_subcommand is None:
        _run_session(config)


def _run_session(config: Config) -> None:
    shelter = seeded_shelter(adopt_all_matches=config.adopt_all_matches)
    session = Session(
        shelter,
        search_types=config.search_types,
        show_welcome=config.show_welcome,
    )
    session.run()


# --------------------------------------------------------------------------- #
# run
# --------------------------------------------------------------------------- #

@main.command()
@click.pass_obj
def run(config: Config):
    """Start the interactive pet finder session."""
    _run_session(config)


# --------------------------------------------------------------------------- #
# list / search (one-shot, against a freshly seeded shelter)
# --------------------------------------------------------------------------- #

@main.command("list")
@click.pass_obj
def list_pets(config: Config):
    """Print the pets available for adoption."""
    shelter = seeded_shelter(adopt_all_matches=config.adopt_all_matches)
    pets = shelter.list_available()
    if not pets:
        click.echo(NONE_AVAILABLE)
        return
    click.echo(LISTING_HEADER)
    for line in render_pets(pets):
        click.echo(line)


@main.command()
@click.option("--type", "type_", default=None, help="Pet type, e.g. dog or cat")
@click.option("--breed", default=None, help="Exact breed name")
@click.pass_obj
def search(config: Config, type_: str | None, breed: str | None):
    """Search available pets by type and breed."""
    if type_ and type_ not in config.search_types:
        type_ = None
    shelter = seeded_shelter(adopt_all_matches=config.adopt_all_matches)
    pets = shelter.search(type_, breed)
    if not pets:
        click.echo(no_results_message(type_, breed))
        return
    for line in render_pets(pets):
        click.echo(line)


# --------------------------------------------------------------------------- #
# init
# --------------------------------------------------------------------------- #

@main.command()
@click.option("--path", default=".", help="Directory to create .petfinder/ in")
def init(path: str):
    """Write a default .petfinder/config.toml."""
    root = Path(path).resolve()
    config_dir = root / CONFIG_DIR_NAME
    config_file = config_dir / "config.toml"

    if config_dir.exists():
        click.echo(f"Already initialised at {config_dir}")
    else:
        config_dir.mkdir(parents=True)
        click.echo(f"Created {config_dir}")

    if not config_file.exists():
        config_file.write_text(DEFAULT_CONFIG_TOML)
        click.echo(f"Created {config_file}")
    else:
        click.echo(f"Config already exists: {config_file}")


# --------------------------------------------------------------------------- #
# serve
# --------------------------------------------------------------------------- #

@main.command()
@click.pass_obj
def serve(config: Config):
    """Start the MCP server on stdio."""
    from petfinder.mcp_server import run_server

    asyncio.run(run_server(config))
