"""Root directory shared by every on-disk cache.

The root is taken from the ``GGG_CACHE_DIR`` environment variable when it is
set, and otherwise from the platform's per-user data directory:

- Linux:   ``~/.local/share/ggg/``
- macOS:   ``~/Library/Application Support/ggg/``
- Windows: ``%APPDATA%\\ggg\\``

Each cache adds its own subdirectory under this root.
"""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

CACHE_DIR_ENV_VAR = "GGG_CACHE_DIR"
"""Environment variable that overrides the default cache root."""

_APP_DIR_NAME = "ggg"


def resolve_cache_root() -> Path:
    """Return the root directory for all caches.

    ``GGG_CACHE_DIR`` wins when set. Otherwise the platform data directory
    is used. Raises ``RuntimeError`` if that directory cannot be found.
    """
    override = os.environ.get(CACHE_DIR_ENV_VAR)
    if override is not None:
        return Path(override)

    data_dir = platformdirs.user_data_dir(appname=None, appauthor=False, roaming=True)
    if not data_dir:
        raise RuntimeError("could not determine the platform data directory")
    return Path(data_dir) / _APP_DIR_NAME