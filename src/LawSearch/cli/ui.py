"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from LawSearch.cli.runner import CommandRunner
from LawSearch.config import DEFAULT_CONFIG_PATH, AppConfig, load_config, load_config_with_defaults


@click.group(help="LawSearch: boolean full-text search over law texts, statutes and rules.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="YAML config file, layered over config/default.yml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads a .env file first so LAWSEARCH_* variables can override the YAML.
    """
    load_dotenv()
    ctx.obj = _load(config_path)


def _load(config_path: Path) -> AppConfig:
    # layer onto the shipped defaults when running from a checkout
    if config_path != DEFAULT_CONFIG_PATH and DEFAULT_CONFIG_PATH.is_file():
        return load_config_with_defaults(config_path)
    return load_config(config_path)


@cli.command("search")
@click.argument("query", nargs=-1)
@click.option(
    "--fulltext/--simple",
    "fulltext",
    default=None,
    help="Force boolean full-text or simple AND search. Defaults to the stored preference.",
)
@click.pass_context
def search_cmd(ctx: click.Context, query: tuple[str, ...], fulltext: bool | None) -> None:
    """Search every catalog for QUERY.

    Supports "quoted phrases", OR, NOT / -term and (grouping); terms are
    ANDed by default.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_search(action=ctx.command.name, query=" ".join(query), fulltext=fulltext)


@cli.command("mode")
@click.argument("value", required=False, type=click.Choice(["on", "off"], case_sensitive=False))
@click.pass_context
def mode_cmd(ctx: click.Context, value: str | None) -> None:
    """Show, or set to on/off, the stored full-text mode preference."""
    runner = CommandRunner(ctx.obj)
    enabled = runner.run_mode(action=ctx.command.name, value=value)
    click.echo("on" if enabled else "off")
