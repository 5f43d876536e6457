"""Exceptions raised by postkit workflows."""

from __future__ import annotations

from pathlib import Path


class PostError(RuntimeError):
    """Base error for post scaffolding failures."""


class EmptyTitleError(PostError):
    """Raised when the title has no usable words."""

    def __init__(self, title: str) -> None:
        if title.strip():
            message = f"Title {title!r} cannot be turned into a file name"
        else:
            message = "Title cannot be empty"
        super().__init__(message)
        self.title = title


class DuplicatePostError(PostError):
    """Raised when the computed post path already exists."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Post already exists at {path}")
        self.path = path


class EditorError(PostError):
    """Raised when the editor cannot be launched or exits with a failure."""
