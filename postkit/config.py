"""Configuration management for postkit."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .editor import DEFAULT_EDITOR

DEFAULT_CONFIG_DIR = Path("~/.config/postkit").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"
DEFAULT_POSTS_DIRNAME = "posts"
DEFAULT_EXTENSION = "md"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file is absent."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True)
class PostkitConfig:
    """In-memory representation of the postkit configuration file."""

    posts_dir: Path
    editor: str = DEFAULT_EDITOR
    extension: str = DEFAULT_EXTENSION
    source_path: Path | None = None


def _optional_string(section: dict, key: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    stripped = value.strip()
    if not stripped:
        raise InvalidConfigError(f"'{key}' must be a non-empty string")
    return stripped


def load_config(
    path: Path | None = None, *, base_dir: Path | None = None
) -> PostkitConfig:
    """Load configuration from ``path`` or the default location.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/postkit/config.toml``) is used if it exists, and
        built-in defaults apply otherwise.
    base_dir:
        Directory that a relative ``posts_dir`` is resolved against. Defaults
        to the current working directory, i.e. the blog root.

    Raises
    ------
    MissingConfigError
        If ``path`` was given explicitly and cannot be found.
    InvalidConfigError
        If settings are present but malformed.
    """

    root = (base_dir or Path.cwd()).expanduser()

    if path is None:
        config_path = DEFAULT_CONFIG_PATH.expanduser()
        if not config_path.exists():
            return PostkitConfig(posts_dir=(root / DEFAULT_POSTS_DIRNAME).resolve())
    else:
        config_path = path.expanduser()
        if not config_path.exists():
            raise MissingConfigError(config_path)

    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Invalid TOML in {config_path}: {exc}") from exc

    section = raw.get("postkit", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'postkit' section must be a table")

    posts_dir_raw = _optional_string(section, "posts_dir") or DEFAULT_POSTS_DIRNAME
    posts_dir = Path(posts_dir_raw).expanduser()
    if not posts_dir.is_absolute():
        posts_dir = root / posts_dir

    editor = _optional_string(section, "editor") or DEFAULT_EDITOR

    extension = _optional_string(section, "extension") or DEFAULT_EXTENSION
    extension = extension.lstrip(".")
    if not extension:
        raise InvalidConfigError("'extension' must contain more than dots")

    return PostkitConfig(
        posts_dir=posts_dir.resolve(),
        editor=editor,
        extension=extension,
        source_path=config_path,
    )


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[postkit]\n"
        f'posts_dir = "{DEFAULT_POSTS_DIRNAME}"\n'
        f'editor = "{DEFAULT_EDITOR}"\n'
        f'extension = "{DEFAULT_EXTENSION}"\n'
    )
    path.write_text(default_content, encoding="utf-8")
    return True
