"""Front matter rendering and parsing for blog posts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml

FRONTMATTER_DELIM = "---"

# Every field except the title is placeholder text meant to be edited by hand.
# The trailing " -" line matches posts already in the content tree.
_TITLE_SLOT = "title"
_TEMPLATE_LINES = (
    FRONTMATTER_DELIM,
    "layout: post",
    _TITLE_SLOT,
    "subtitle: a nice subtitle you need to change",
    "tags: [testing]",
    "mermaid: true",
    "credit-img: Photo by xxx",
    "cover-img: assets/img/house_model_code.png",
    "thumbnail-img: assets/img/house_model_code_tn.png",
    " -",
    FRONTMATTER_DELIM,
)


@dataclass(slots=True)
class PostHeader:
    """Outcome of parsing a post's front matter."""

    title: str | None
    metadata: dict[str, Any] = field(default_factory=dict)


def escape_title(title: str) -> str:
    """Escape ``&`` as ``&amp;``; nothing else is touched."""

    return title.replace("&", "&amp;")


def unescape_title(title: str) -> str:
    return title.replace("&amp;", "&")


def render_front_matter(title: str) -> str:
    title_line = f'title: "{escape_title(title)}"'
    lines = [title_line if line == _TITLE_SLOT else line for line in _TEMPLATE_LINES]
    return "\n".join(lines) + "\n"


def parse_front_matter(raw: str) -> PostHeader:
    lines = raw.splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIM:
        return PostHeader(title=None)

    try:
        closing_index = lines.index(FRONTMATTER_DELIM, 1)
    except ValueError:
        return PostHeader(title=None)

    metadata_block = "\n".join(lines[1:closing_index])

    metadata: dict[str, Any] = {}
    try:
        loaded = yaml.safe_load(metadata_block) or {}
        if isinstance(loaded, dict):
            metadata = loaded
    except yaml.YAMLError:
        metadata = {}

    title: str | None = None
    title_value = metadata.get("title")
    if isinstance(title_value, str):
        title = unescape_title(title_value).strip() or None

    return PostHeader(title=title, metadata=metadata)
