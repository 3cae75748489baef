"""Shared fixtures: a throwaway Bitnami tree and a capturing console."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from apache_node_proxy.settings import ProxySettings


@pytest.fixture
def bitnami(tmp_path: Path) -> ProxySettings:
    """Settings pointing at a minimal Bitnami layout under tmp_path."""
    base = tmp_path / "bitnami"
    conf = base / "apache" / "conf"
    vhosts = conf / "vhosts"
    vhosts.mkdir(parents=True)
    return ProxySettings(
        base_dir=base,
        conf_dir=conf,
        vhosts_dir=vhosts,
        restart_command=f"{base}/ctlscript.sh restart apache",
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "projects" / "testapp"
    project.mkdir(parents=True)
    return project


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)
