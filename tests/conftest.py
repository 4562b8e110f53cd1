import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from kdp.config import KDP_HOME_ENV


@pytest.fixture
def kdp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point $KDP_HOME at a not-yet-created directory under tmp_path."""

    home = tmp_path / "kdp-home"
    monkeypatch.setenv(KDP_HOME_ENV, str(home))
    return home
