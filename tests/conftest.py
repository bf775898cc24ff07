"""Shared test fixtures: project trees, pom files and configuration documents."""

import textwrap
from pathlib import Path

import pytest
import yaml

from jmw.models import Config
from tests.helpers import FakeRunner, project_data, write_pom


@pytest.fixture
def wildfly_root(tmp_path: Path) -> Path:
    root = tmp_path / "wildfly"
    root.mkdir()
    return root


@pytest.fixture
def single_module_repo(tmp_path: Path) -> Path:
    """Project whose base path is not a build root."""
    base = tmp_path / "repo" / "app1"
    write_pom(base / "core", "core", "jar")
    (base / "core" / "src" / "main" / "java").mkdir(parents=True)
    write_pom(base / "webapp", "webapp", "war")
    write_pom(base / "auth", "auth", "jar")
    return base


@pytest.fixture
def multi_module_repo(tmp_path: Path) -> Path:
    """Project whose base path holds an aggregator pom."""
    base = tmp_path / "repo" / "mto"
    write_pom(base, "mto-parent", "pom", modules=["services/orders", "web"])
    write_pom(base / "services" / "orders", "orders", "jar")
    write_pom(base / "web", "web", "war")
    return base


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a configuration document and return its path."""
    def _write(data: dict, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False))
        return path
    return _write


@pytest.fixture
def config_text(tmp_path: Path):
    """Write raw YAML text and return its path."""
    def _write(text: str, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text))
        return path
    return _write


@pytest.fixture
def app_config(single_module_repo: Path, wildfly_root: Path) -> Config:
    return Config.from_dict({
        "projects": {"app1": project_data(single_module_repo, wildfly_root)},
    })


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
