"""Config file discovery and loading.

Walk-up finder locates hallctl.toml, similar to how git finds .git/.
The HALLCTL_CONFIG env var and the --config CLI flag take precedence.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from hallctl.config.models import HallConfig

CONFIG_FILENAME = "hallctl.toml"
CONFIG_ENV_VAR = "HALLCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for hallctl.toml.

    Returns the path to the config file, or None if not found.
    An HALLCTL_CONFIG env var pointing at a missing file yields None
    rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> HallConfig:
    """Load and validate config from a TOML file.

    Returns the default HallConfig when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return HallConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return HallConfig.model_validate(data)
