"""Config file discovery.

Walk-up finder locates tablemint.toml, similar to how git finds .git/.
The TABLEMINT_CONFIG env var and the --config CLI flag take precedence.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tablemint.toml"
CONFIG_ENV_VAR = "TABLEMINT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest tablemint.toml at or above *start* (default: cwd).

    If TABLEMINT_CONFIG is set it wins outright: its path is returned when
    the file exists and None otherwise, without walking.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
