"""Path constants for camparams configuration and state."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PROJECT_ROOT = PACKAGE_ROOT.parent

# Default feature profile; see camparams.params.features.
PROFILE_PATH = PROJECT_ROOT / "profile.txt"

# User-specific state (allows running from read-only installs)
_USER_STATE_ENV = os.environ.get("CAMPARAMS_STATE_DIR")
USER_STATE_DIR = Path(_USER_STATE_ENV).expanduser() if _USER_STATE_ENV else (Path.home() / ".camparams")
USER_CONFIG_OVERRIDES_DIR = USER_STATE_DIR / "config_overrides"


__all__ = [
    "PACKAGE_ROOT",
    "PROJECT_ROOT",
    "PROFILE_PATH",
    "USER_STATE_DIR",
    "USER_CONFIG_OVERRIDES_DIR",
]
