"""High-level post workflows used by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Iterator, Sequence

import click

from ..editor import open_editor
from ..errors import DuplicatePostError, EmptyTitleError
from ..frontmatter import parse_front_matter, render_front_matter
from ..utils.datetime_fmt import parse_iso_date, to_iso_date, today_local
from ..utils.slug import slugify

EchoFunc = Callable[[str], None]
EditFunc = Callable[[Path, str | None], None]


@dataclass(slots=True)
class PostDraft:
    """A planned post: everything needed to write it, computed without I/O."""

    title: str
    slug: str
    day: date
    path: Path
    content: str


@dataclass(slots=True)
class PostSummary:
    """A post found on disk, as shown by ``postkit ls``."""

    day: date
    slug: str
    title: str
    path: Path


def build_title(title_words: Sequence[str]) -> str:
    return " ".join(title_words).strip()


def post_filename(day: date, slug: str, extension: str) -> str:
    return f"{to_iso_date(day)}-{slug}.{extension}"


def plan_post(
    title_words: Sequence[str],
    *,
    posts_dir: Path,
    day: date,
    extension: str = "md",
) -> PostDraft:
    """Compute the path and front matter for a new post.

    Raises ``EmptyTitleError`` when the title is blank or produces an empty
    slug, so a file with a meaningless name is never planned.
    """

    title = build_title(title_words)
    slug = slugify(title)
    if not title or not slug:
        raise EmptyTitleError(title)

    path = posts_dir / post_filename(day, slug, extension)
    return PostDraft(
        title=title,
        slug=slug,
        day=day,
        path=path,
        content=render_front_matter(title),
    )


def write_post(draft: PostDraft) -> Path:
    """Create the draft's file, refusing to touch an existing one."""

    draft.path.parent.mkdir(parents=True, exist_ok=True)
    # "x" mode makes the existence check and the create a single step.
    try:
        fh = draft.path.open("x", encoding="utf-8")
    except FileExistsError as exc:
        raise DuplicatePostError(draft.path) from exc

    try:
        with fh:
            fh.write(draft.content)
    except Exception:
        # Leave no partial file behind to block the next attempt.
        draft.path.unlink(missing_ok=True)
        raise
    return draft.path


def create_post(
    title_words: Sequence[str],
    *,
    editor: str | None,
    posts_dir: Path,
    day: date | None = None,
    extension: str = "md",
    edit_fn: EditFunc = open_editor,
    echo: EchoFunc = click.echo,
) -> Path:
    """Scaffold a new post and open it in ``editor``.

    The file exists on disk before the editor is launched; an ``EditorError``
    from ``edit_fn`` propagates but the file is kept.
    """

    draft = plan_post(
        title_words,
        posts_dir=posts_dir,
        day=day or today_local(),
        extension=extension,
    )
    path = write_post(draft)
    echo(f"Created post {path}")
    edit_fn(path, editor)
    return path


def _split_post_stem(stem: str) -> tuple[date, str] | None:
    # "2025-06-01-my-first-post" -> (date(2025, 6, 1), "my-first-post")
    date_part, sep, slug = stem[:10], stem[10:11], stem[11:]
    if sep != "-" or not slug:
        return None
    try:
        return parse_iso_date(date_part), slug
    except ValueError:
        return None


def iter_posts(posts_dir: Path, *, extension: str = "md") -> Iterator[PostSummary]:
    """Yield posts in ``posts_dir``, newest first.

    Files whose names do not follow ``YYYY-MM-DD-<slug>.<extension>`` are
    skipped. Titles come from the front matter, falling back to the slug.
    """

    if not posts_dir.is_dir():
        return

    found: list[PostSummary] = []
    for path in posts_dir.glob(f"*.{extension}"):
        if not path.is_file():
            continue
        parts = _split_post_stem(path.stem)
        if parts is None:
            continue
        day, slug = parts
        header = parse_front_matter(path.read_text(encoding="utf-8", errors="replace"))
        found.append(
            PostSummary(day=day, slug=slug, title=header.title or slug, path=path)
        )

    found.sort(key=lambda post: (post.day, post.path.name), reverse=True)
    yield from found
