"""Launch an external editor on a freshly created post."""

from __future__ import annotations

from pathlib import Path

import click

from .errors import EditorError

DEFAULT_EDITOR = "vim"


def open_editor(path: Path, editor: str | None = None) -> None:
    """Open ``path`` in ``editor`` and wait for it to exit.

    Falls back to ``DEFAULT_EDITOR`` when ``editor`` is ``None`` or blank.
    """

    command = (editor or "").strip() or DEFAULT_EDITOR
    try:
        click.edit(filename=str(path), editor=command)
    except click.ClickException as exc:
        raise EditorError(exc.format_message()) from exc
    except OSError as exc:  # pragma: no cover - click usually wraps these
        raise EditorError(f"{command}: failed to launch editor: {exc}") from exc
