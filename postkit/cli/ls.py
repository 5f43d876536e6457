"""List command for postkit CLI."""

from __future__ import annotations

import click

from ..services.posts import iter_posts
from ..utils.datetime_fmt import to_iso_date
from ._common import PostkitCliError, get_app


@click.command(name="ls")
@click.option("-n", "--limit", type=int, default=10, help="Maximum posts to list")
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    help="Reverse order (oldest first)",
)
@click.pass_context
def ls(ctx: click.Context, limit: int, reverse: bool) -> None:
    """List the most recent posts (by date in the file name)."""

    app = get_app(ctx)
    config = app.config

    try:
        posts = list(iter_posts(config.posts_dir, extension=config.extension))
    except OSError as exc:  # pragma: no cover - pass-through
        raise PostkitCliError(str(exc)) from exc

    posts = posts[:limit] if limit > 0 else posts
    if reverse:
        posts = list(reversed(posts))

    for post in posts:
        click.echo(f"{to_iso_date(post.day)}  {post.title}  ({post.path.name})")


def register(cli: click.Group) -> None:
    """Register the command with the root CLI group."""

    cli.add_command(ls)
