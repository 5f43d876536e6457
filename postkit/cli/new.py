"""New command for postkit CLI."""

from __future__ import annotations

from datetime import date

import click

from ..editor import open_editor
from ..errors import EditorError, PostError
from ..services.posts import create_post
from ..utils.datetime_fmt import parse_iso_date
from ._common import PostkitCliError, get_app


def _parse_date_option(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> date | None:
    if value is None:
        return None
    try:
        return parse_iso_date(value)
    except ValueError as exc:
        raise click.BadParameter("expected YYYY-MM-DD") from exc


@click.command(name="new")
@click.argument("title_words", nargs=-1, required=True)
@click.option(
    "-e",
    "--editor",
    default=None,
    help="Editor command to open the post with (defaults to config, then vim).",
)
@click.option(
    "--date",
    "day",
    default=None,
    callback=_parse_date_option,
    help="Date to put in the file name instead of today (YYYY-MM-DD).",
)
@click.pass_context
def new(
    ctx: click.Context,
    title_words: tuple[str, ...],
    editor: str | None,
    day: date | None,
) -> None:
    """Create a dated post from TITLE_WORDS and open it in an editor."""

    app = get_app(ctx)
    config = app.config

    try:
        create_post(
            title_words,
            editor=editor or config.editor,
            posts_dir=config.posts_dir,
            day=day,
            extension=config.extension,
            edit_fn=open_editor,
        )
    except EditorError as exc:
        raise PostkitCliError(f"Post was created but the editor failed: {exc}") from exc
    except (PostError, OSError) as exc:
        raise PostkitCliError(str(exc)) from exc


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(new)
