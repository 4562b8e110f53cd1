"""Environment-driven settings for the KDP home layout."""
from __future__ import annotations

import os
from typing import Mapping, Optional

KDP_HOME_ENV = "KDP_HOME"
KDP_LOG_LEVEL_ENV = "KDP_LOG_LEVEL"

DEFAULT_KDP_HOME = ".kdp"

HOME_DIR_MODE = 0o750
DIR_MODE = 0o755

CAP_CENTER_DIR = "centers"
CAP_CENTER_TMP_DIR = ".tmp"
CAPABILITY_DIR = "capabilities"
REPO_CONFIG_FILE = "config.yaml"
CURRENT_ENV_FILE = "curenv"


def bind_env(
    default: Optional[str],
    *keys: str,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Return the first non-empty value among ``keys``, else ``default``."""

    source = os.environ if environ is None else environ
    for key in keys:
        value = source.get(key)
        if value:
            return value
    return default
