"""Home directory layout helpers for the KDP command line tools."""

from .errors import KdpHomeError
from .paths import (
    KdpHome,
    create_if_not_exist,
    get_cap_center_dir,
    get_capability_dir,
    get_current_env_path,
    get_kdp_home_dir,
    get_repo_config,
    init_cap_center_dir,
    init_capability_dir,
    init_dirs,
)

__all__ = [
    "KdpHome",
    "KdpHomeError",
    "create_if_not_exist",
    "get_cap_center_dir",
    "get_capability_dir",
    "get_current_env_path",
    "get_kdp_home_dir",
    "get_repo_config",
    "init_cap_center_dir",
    "init_capability_dir",
    "init_dirs",
]
