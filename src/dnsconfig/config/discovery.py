"""Config file discovery.

Walk-up finder locates dnsconfig.toml, similar to how git finds .git/,
then falls back to the system-wide /etc/dnsconfig.toml.
Supports DNSCONFIG_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "dnsconfig.toml"
CONFIG_ENV_VAR = "DNSCONFIG_CONFIG"
SYSTEM_CONFIG = Path("/etc") / CONFIG_FILENAME


def find_config(start: Path | None = None, *, include_system: bool = True) -> Path | None:
    """Walk up from *start* (default: cwd) looking for dnsconfig.toml.

    Returns the path to the config file, or None if not found.
    Checks DNSCONFIG_CONFIG env var first and SYSTEM_CONFIG last.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    if include_system and SYSTEM_CONFIG.is_file():
        return SYSTEM_CONFIG
    return None
