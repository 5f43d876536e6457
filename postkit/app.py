"""Application bootstrap and context container for postkit."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import PostkitConfig, load_config


@dataclass(slots=True)
class AppContext:
    """Aggregates settings for the CLI lifecycle."""

    config: PostkitConfig


def bootstrap(config_path: Path | None, *, base_dir: Path | None = None) -> AppContext:
    """Load configuration for a single CLI invocation."""

    # Defer error mapping to the CLI, which knows how to present messages.
    config = load_config(config_path, base_dir=base_dir)
    return AppContext(config=config)
