"""Shared test fixtures for lmkdir tests."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from lmk.utils import set_verbosity_override


@pytest.fixture(autouse=True)
def config_home(tmp_path, monkeypatch):
    """Isolate every test from the user's config and environment.

    Points XDG_CONFIG_HOME at a temporary directory, clears LMKDIR_MANIFEST
    and resets any -v/-q override. Returns the lmkdir config directory
    (not created).
    """
    xdg = tmp_path / "xdg"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    monkeypatch.delenv("LMKDIR_MANIFEST", raising=False)
    set_verbosity_override(None)
    return xdg / "lmkdir"


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Create a working directory with a manifest and matching directories.

    Sets up:
    - work/lmkdir_manifest listing project_a, project_b and archive
      (unsorted, with a duplicate and a trailing slash)
    - work/project_a, work/project_b, work/archive directories
    - Changes working directory to work/

    Returns the work directory path.
    """
    work = tmp_path / "work"
    work.mkdir()
    (work / "lmkdir_manifest").write_text("project_b\n  archive/\nproject_a\nproject_b\n\n")
    for name in ("project_a", "project_b", "archive"):
        (work / name).mkdir()

    monkeypatch.chdir(work)
    return work


@pytest.fixture
def manifest(workspace) -> Path:
    return workspace / "lmkdir_manifest"


@pytest.fixture
def runner():
    return CliRunner()


def write_config(config_dir: Path, config: dict) -> Path:
    """Write a config.yaml into `config_dir` and return its path."""
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "config.yaml"
    config_file.write_text(yaml.dump(config, default_flow_style=False))
    return config_file


def manifest_lines(path: Path) -> list[str]:
    """Names in a manifest file, in file order."""
    return path.read_text().splitlines()
