"""Config command for postkit CLI."""

from __future__ import annotations

from pathlib import Path

import click

from .. import config as config_module
from ..config import ConfigError, bootstrap_config_file, load_config
from ..editor import DEFAULT_EDITOR, EditorError, open_editor
from ._common import PostkitCliError


def _configured_editor(config_path: Path) -> str:
    # A broken file still has to be openable so it can be fixed.
    try:
        return load_config(config_path).editor
    except ConfigError:
        return DEFAULT_EDITOR


@click.command(name="config")
@click.pass_context
def config(ctx: click.Context) -> None:
    """Create the postkit configuration file if needed and open it."""

    selected_path: Path | None = ctx.obj.get("config_path")
    config_path = selected_path or config_module.DEFAULT_CONFIG_PATH

    if bootstrap_config_file(config_path):
        click.echo(f"Created configuration at {config_path}")

    editor = _configured_editor(config_path)
    try:
        open_editor(config_path, editor)
    except EditorError as exc:
        raise PostkitCliError(f"Failed to launch editor: {exc}") from exc

    click.echo(f"Opened configuration at {config_path}")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(config)
