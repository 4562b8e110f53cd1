from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from kdp import cli


def test_show_json(kdp_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["home"] == str(kdp_home)
    assert data["repo_config"] == str(kdp_home / "centers" / "config.yaml")
    assert data["curenv"] == str(kdp_home / "curenv")
    assert kdp_home.is_dir()
    assert not (kdp_home / "centers").exists()


def test_show_yaml(kdp_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["show", "--format", "yaml"]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert list(data) == ["home", "centers", "centers_tmp", "capabilities", "repo_config", "curenv"]
    assert data["capabilities"] == str(kdp_home / "capabilities")


def test_init_creates_directories(kdp_home: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["init", "--verbose"]) == 0
    assert (kdp_home / "capabilities").is_dir()
    assert (kdp_home / "centers" / ".tmp").is_dir()
    data = json.loads(capsys.readouterr().out)
    assert data["centers_tmp"] == str(kdp_home / "centers" / ".tmp")


def test_init_reports_failure(kdp_home: Path) -> None:
    kdp_home.mkdir()
    (kdp_home / "centers").write_text("", encoding="utf-8")
    assert cli.main(["init"]) == 1


def test_command_is_required() -> None:
    with pytest.raises(SystemExit):
        cli.main([])


def test_init_resolves_home_once(kdp_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    original = cli.KdpHome.from_env

    def _counting(environ=None):
        calls.append(environ)
        return original(environ)

    monkeypatch.setattr(cli.KdpHome, "from_env", _counting)
    assert cli.main(["init", "--verbose"]) == 0
    assert len(calls) == 1
    assert (kdp_home / "centers" / ".tmp").is_dir()
