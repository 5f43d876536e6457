"""Tests for the post scaffolding workflow."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from postkit.errors import DuplicatePostError, EditorError, EmptyTitleError
from postkit.frontmatter import render_front_matter
from postkit.services.posts import (
    build_title,
    create_post,
    iter_posts,
    plan_post,
    write_post,
)

DAY = date(2025, 6, 1)


class RecordingEditor:
    def __init__(self) -> None:
        self.calls: list[tuple[Path, str | None, bool]] = []

    def __call__(self, path: Path, editor: str | None = None) -> None:
        self.calls.append((path, editor, path.exists()))


def test_build_title_joins_words_with_spaces() -> None:
    assert build_title(["My", "First", "Post"]) == "My First Post"


def test_plan_post_is_pure_and_deterministic(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    first = plan_post(["Hello,", "World"], posts_dir=posts_dir, day=DAY)
    second = plan_post(["hello", "world"], posts_dir=posts_dir, day=DAY)

    assert first.path == second.path == posts_dir / "2025-06-01-hello-world.md"
    assert first.title == "Hello, World"
    assert first.content == render_front_matter("Hello, World")
    assert not posts_dir.exists()


def test_plan_post_uses_configured_extension(tmp_path: Path) -> None:
    draft = plan_post(["Notes"], posts_dir=tmp_path, day=DAY, extension="markdown")
    assert draft.path.name == "2025-06-01-notes.markdown"


@pytest.mark.parametrize("words", [[""], ["  ", ""], ["!!!", "?"]])
def test_plan_post_rejects_titles_without_usable_words(
    tmp_path: Path, words: list[str]
) -> None:
    with pytest.raises(EmptyTitleError):
        plan_post(words, posts_dir=tmp_path, day=DAY)


def test_create_post_writes_file_then_launches_editor(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    editor = RecordingEditor()
    messages: list[str] = []

    path = create_post(
        ["My", "First", "Post"],
        editor="nano",
        posts_dir=posts_dir,
        day=DAY,
        edit_fn=editor,
        echo=messages.append,
    )

    assert path == posts_dir / "2025-06-01-my-first-post.md"
    content = path.read_text(encoding="utf-8")
    assert content.startswith("---\n")
    assert 'title: "My First Post"\n' in content
    assert content.rstrip("\n").endswith("---")
    assert messages == [f"Created post {path}"]
    assert editor.calls == [(path, "nano", True)]


def test_second_create_fails_and_leaves_first_file_unchanged(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    editor = RecordingEditor()
    path = create_post(
        ["Twice"], editor=None, posts_dir=posts_dir, day=DAY, edit_fn=editor,
        echo=lambda _msg: None,
    )
    path.write_text("hand edited\n", encoding="utf-8")

    with pytest.raises(DuplicatePostError) as excinfo:
        create_post(
            ["Twice"], editor=None, posts_dir=posts_dir, day=DAY, edit_fn=editor,
            echo=lambda _msg: None,
        )

    assert excinfo.value.path == path
    assert str(path) in str(excinfo.value)
    assert path.read_text(encoding="utf-8") == "hand edited\n"
    assert len(editor.calls) == 1


def test_empty_title_touches_nothing(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"
    editor = RecordingEditor()

    with pytest.raises(EmptyTitleError):
        create_post(["   "], editor=None, posts_dir=posts_dir, day=DAY, edit_fn=editor)

    assert not posts_dir.exists()
    assert editor.calls == []


def test_editor_failure_keeps_created_file(tmp_path: Path) -> None:
    posts_dir = tmp_path / "posts"

    def failing_editor(path: Path, editor: str | None = None) -> None:
        raise EditorError("nope: Editing failed")

    with pytest.raises(EditorError):
        create_post(
            ["Kept"], editor="nope", posts_dir=posts_dir, day=DAY,
            edit_fn=failing_editor, echo=lambda _msg: None,
        )

    assert (posts_dir / "2025-06-01-kept.md").is_file()


def test_create_post_defaults_to_today(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        "postkit.services.posts.today_local", lambda: date(2024, 12, 31)
    )
    path = create_post(
        ["Year", "end"], editor=None, posts_dir=tmp_path, edit_fn=RecordingEditor(),
        echo=lambda _msg: None,
    )
    assert path.name == "2024-12-31-year-end.md"


def test_iter_posts_lists_newest_first_with_titles(tmp_path: Path) -> None:
    for words, day in ((["Older"], date(2024, 1, 2)), (["Ben & Jerry"], DAY)):
        create_post(
            words, editor=None, posts_dir=tmp_path, day=day,
            edit_fn=RecordingEditor(), echo=lambda _msg: None,
        )
    (tmp_path / "2023-03-03-no-front-matter.md").write_text("body\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("ignored\n", encoding="utf-8")
    (tmp_path / "2025-13-01-bad-date.md").write_text("ignored\n", encoding="utf-8")

    posts = list(iter_posts(tmp_path))

    assert [(p.day, p.title) for p in posts] == [
        (DAY, "Ben & Jerry"),
        (date(2024, 1, 2), "Older"),
        (date(2023, 3, 3), "no-front-matter"),
    ]


def test_iter_posts_on_missing_directory_yields_nothing(tmp_path: Path) -> None:
    assert list(iter_posts(tmp_path / "absent")) == []


def test_unsluggable_title_error_names_file_name_problem(tmp_path: Path) -> None:
    with pytest.raises(EmptyTitleError, match="cannot be turned into a file name"):
        plan_post(["日本語"], posts_dir=tmp_path, day=DAY)


def test_accented_title_keeps_its_letters_in_file_name(tmp_path: Path) -> None:
    draft = plan_post(["Über", "Café"], posts_dir=tmp_path, day=DAY)
    assert draft.path.name == "2025-06-01-uber-cafe.md"
    assert 'title: "Über Café"\n' in draft.content


def test_failed_write_leaves_no_partial_file(tmp_path: Path) -> None:
    # A lone surrogate cannot be encoded as UTF-8, so the write itself fails.
    draft = plan_post(["Broken", "\ud800"], posts_dir=tmp_path, day=DAY)

    with pytest.raises(UnicodeEncodeError):
        write_post(draft)

    assert not draft.path.exists()
    draft.content = render_front_matter("Broken")
    assert write_post(draft).read_text(encoding="utf-8") == draft.content
