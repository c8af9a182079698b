"""Locate pagesize.toml.

The nearest file in the start directory or any ancestor wins, much as git
finds .git/. PAGESIZE_CONFIG names a file directly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "pagesize.toml"
CONFIG_ENV_VAR = "PAGESIZE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
