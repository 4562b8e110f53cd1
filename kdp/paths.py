"""Path helpers to keep the KDP home layout consistent.

Layout relative to the resolved home directory::

    <home>/
      centers/
        .tmp/
        config.yaml
      capabilities/
      curenv

Only directories are created here; ``config.yaml`` and ``curenv`` are
returned as paths for the callers that own those files.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from .config import (
    CAP_CENTER_DIR,
    CAP_CENTER_TMP_DIR,
    CAPABILITY_DIR,
    CURRENT_ENV_FILE,
    DEFAULT_KDP_HOME,
    DIR_MODE,
    HOME_DIR_MODE,
    KDP_HOME_ENV,
    REPO_CONFIG_FILE,
    bind_env,
)
from .errors import KdpHomeError
from .logging import get_logger

LOGGER = get_logger(__name__)


def _default_home() -> Path:
    try:
        return Path.home() / DEFAULT_KDP_HOME
    except (RuntimeError, KeyError) as exc:
        raise KdpHomeError(f"cannot determine user home directory: {exc}") from exc


@dataclass(frozen=True)
class KdpHome:
    """Resolved KDP home directory.

    ``from_env`` reads the environment once; the properties only join path
    segments onto ``root`` and never touch the filesystem.
    """

    root: Path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "KdpHome":
        custom = bind_env(None, KDP_HOME_ENV, environ=environ)
        root = Path(custom) if custom else _default_home()
        return cls(root)

    def ensure(self) -> Path:
        """Create ``root`` and its missing parents with mode 0750 and return it.

        Only a missing ``root`` triggers creation. Any other stat failure
        leaves the path untouched and it is returned as-is; later accessors
        surface the problem when they touch the filesystem.
        """

        try:
            self.root.stat()
        except FileNotFoundError:
            try:
                for directory in [*reversed(self.root.parents), self.root]:
                    if not directory.exists():
                        directory.mkdir(mode=HOME_DIR_MODE, exist_ok=True)
            except OSError as exc:
                raise KdpHomeError(f"error when create KDP home directory: {exc}") from exc
            LOGGER.debug("Created KDP home directory %s", self.root)
        except OSError as exc:
            LOGGER.debug("Skipping creation of KDP home %s: %s", self.root, exc)
        return self.root

    @property
    def cap_center_dir(self) -> Path:
        return self.root / CAP_CENTER_DIR

    @property
    def cap_center_tmp_dir(self) -> Path:
        return self.cap_center_dir / CAP_CENTER_TMP_DIR

    @property
    def repo_config(self) -> Path:
        return self.cap_center_dir / REPO_CONFIG_FILE

    @property
    def capability_dir(self) -> Path:
        return self.root / CAPABILITY_DIR

    @property
    def current_env_path(self) -> Path:
        return self.root / CURRENT_ENV_FILE

    def init_dirs(self) -> None:
        """Create ``capabilities/`` and ``centers/.tmp/`` under this home."""

        self.ensure()
        create_if_not_exist(self.capability_dir)
        create_if_not_exist(self.cap_center_tmp_dir)

    def layout(self) -> Dict[str, Path]:
        return {
            "home": self.root,
            "centers": self.cap_center_dir,
            "centers_tmp": self.cap_center_tmp_dir,
            "capabilities": self.capability_dir,
            "repo_config": self.repo_config,
            "curenv": self.current_env_path,
        }


def get_kdp_home_dir() -> Path:
    """Return the KDP home directory, creating it when missing.

    ``$KDP_HOME`` wins when set to a non-empty value and is used verbatim;
    otherwise the home is ``~/.kdp``.
    """

    return KdpHome.from_env().ensure()


def get_cap_center_dir() -> Path:
    return KdpHome(get_kdp_home_dir()).cap_center_dir


def get_repo_config() -> Path:
    return get_cap_center_dir() / REPO_CONFIG_FILE


def get_capability_dir() -> Path:
    """Return the directory holding installed workloads and traits."""

    return KdpHome(get_kdp_home_dir()).capability_dir


def get_current_env_path() -> Path:
    return KdpHome(get_kdp_home_dir()).current_env_path


def init_dirs() -> None:
    init_capability_dir()
    init_cap_center_dir()


def init_cap_center_dir() -> None:
    create_if_not_exist(get_cap_center_dir() / CAP_CENTER_TMP_DIR)


def init_capability_dir() -> None:
    create_if_not_exist(get_capability_dir())


def create_if_not_exist(path: str | Path) -> bool:
    """Create ``path`` (mode 0755, with parents) unless it already exists.

    Returns ``True`` when the path was already present and ``False`` when it
    was just created. Stat errors other than a missing path propagate as-is.
    The existence check and the mkdir are not atomic.
    """

    target = Path(path)
    try:
        target.stat()
    except FileNotFoundError:
        target.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        LOGGER.debug("Created directory %s", target)
        return False
    return True
