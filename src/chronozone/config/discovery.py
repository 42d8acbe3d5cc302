"""Locate and read ``chronozone.toml``.

The file is found the way git finds ``.git/``: the current directory
first, then each parent up to the filesystem root. ``CHRONOZONE_CONFIG``
pins the file instead; when it names a missing file no config is used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from chronozone.config.models import ChronoConfig

CONFIG_FILENAME = "chronozone.toml"
CONFIG_ENV_VAR = "CHRONOZONE_CONFIG"


class ConfigError(click.ClickException):
    """A config file that cannot be parsed or does not fit the schema."""


def find_config(start: Path | None = None) -> Path | None:
    """The config file governing *start* (default: cwd), or None."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and check it against :class:`ChronoConfig`.

    Only the keys present in the file are returned, so that settings
    sources with a higher priority can still override the rest.

    Raises:
        ConfigError: The file is not TOML, or a section has an unknown
            key or a value of the wrong type.
    """
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    try:
        ChronoConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}") from exc
    return data
