"""Locating ``meetcount.toml``.

An explicit ``--config`` path wins, then ``MEETCOUNT_CONFIG``, then the
nearest ``meetcount.toml`` in the start directory or any of its parents.
A path given explicitly (flag or env var) must exist.
"""

from __future__ import annotations

import os
from pathlib import Path

from meetcount.domain.errors import ConfigError

CONFIG_FILENAME = "meetcount.toml"
CONFIG_ENV_VAR = "MEETCOUNT_CONFIG"


def find_config(
    start: Path | None = None,
    *,
    explicit: str | Path | None = None,
) -> Path | None:
    """Return the config file to use, or None when there is none.

    Raises:
        ConfigError: If *explicit* or ``MEETCOUNT_CONFIG`` names a missing file.
    """
    if explicit is not None:
        return _require_file(Path(explicit), "--config")

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return _require_file(Path(env_path), CONFIG_ENV_VAR)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _require_file(path: Path, source: str) -> Path:
    if not path.is_file():
        msg = f"Config file from {source} not found: {path}"
        raise ConfigError(msg)
    return path
