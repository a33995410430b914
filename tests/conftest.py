"""Shared test fixtures for overlaykit tests."""
from pathlib import Path

import pytest

from overlaykit.core.config import ScaffoldConfig, set_config


@pytest.fixture(autouse=True)
def reset_global_config(monkeypatch):
    """Keep tests away from the real /etc/portage and any user config."""
    for var in ("OVK_CONFIG", "OVK_MOCK", "OVK_OVERLAY_NAME", "OVK_OVERLAY_BASE",
                "OVK_GENTOO_REPO", "OVK_REPOS_CONF_DIR", "OVK_KEYWORDS_DIR"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("overlaykit.cli_support.CONFIG_PATHS", [])
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def scaffold_config(tmp_path: Path) -> ScaffoldConfig:
    """ScaffoldConfig rooted entirely inside tmp_path."""
    (tmp_path / "repos.conf").mkdir()
    return ScaffoldConfig(
        overlay_base=tmp_path / "repos",
        gentoo_repo=Path("/var/db/repos/gentoo"),
        repos_conf_dir=tmp_path / "repos.conf",
        keywords_dir=tmp_path / "package.accept_keywords",
    )


@pytest.fixture
def env_paths(tmp_path: Path, monkeypatch) -> Path:
    """Point the CLI's environment-driven config at tmp_path."""
    monkeypatch.setenv("OVK_OVERLAY_BASE", str(tmp_path / "repos"))
    monkeypatch.setenv("OVK_REPOS_CONF_DIR", str(tmp_path / "repos.conf"))
    monkeypatch.setenv("OVK_KEYWORDS_DIR", str(tmp_path / "package.accept_keywords"))
    (tmp_path / "repos.conf").mkdir()
    return tmp_path
