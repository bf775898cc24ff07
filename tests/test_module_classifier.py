"""
Tests for module classification and working directory detection.
"""

from pathlib import Path

import pytest

from jmw.api.exceptions import (
    DescriptorNotFoundError,
    NotInProjectError,
    ParseError,
    UnconfiguredModuleError,
)
from jmw.core import classify_module, detect
from jmw.models import BuildDescriptor, Config, ProjectConfig
from tests.helpers import project_data, write_pom


def make_project(base_path: Path, **modules) -> ProjectConfig:
    return ProjectConfig(
        name="app",
        base_path=str(base_path),
        wildfly_root="/opt/wildfly",
        modules=modules,
    )


class TestClassifyModule:

    def test_normal_module_in_single_module_project(self, single_module_repo: Path):
        project = make_project(single_module_repo, core="")
        pom = single_module_repo / "core" / "pom.xml"

        result = classify_module("app", project, BuildDescriptor("core"), pom)

        assert result.module_name == "core"
        assert result.module_path == single_module_repo / "core"
        assert result.repo_root == single_module_repo / "core"
        assert not result.is_multi_module_build
        assert not result.is_global
        assert result.deployment_path == ""
        assert result.target_dir == single_module_repo / "core" / "target"

    def test_global_module(self, single_module_repo: Path):
        project = make_project(single_module_repo, auth="modules/org/auth/main")
        pom = single_module_repo / "auth" / "pom.xml"

        result = classify_module("app", project, BuildDescriptor("auth"), pom)

        assert result.is_global
        assert result.deployment_path == "modules/org/auth/main"

    def test_module_in_multi_module_project(self, multi_module_repo: Path):
        project = make_project(multi_module_repo, orders="")
        pom = multi_module_repo / "services" / "orders" / "pom.xml"

        result = classify_module("mto", project, BuildDescriptor("orders"), pom)

        assert result.repo_root == multi_module_repo
        assert result.is_multi_module_build
        assert result.relative_module_path == "services/orders"

    def test_artifact_id_takes_precedence_over_directory(self, tmp_path: Path):
        pom = write_pom(tmp_path / "orders-ejb-module", "orders-EJB", "ejb")
        project = make_project(tmp_path / "nowhere", **{"orders-EJB": ""})

        result = classify_module("app", project, BuildDescriptor("orders-EJB", "ejb"), pom)

        assert result.module_name == "orders-EJB"
        assert result.packaging == "ejb"

    def test_empty_artifact_id_falls_back_to_directory(self, tmp_path: Path):
        pom = tmp_path / "legacy" / "pom.xml"
        project = make_project(tmp_path / "nowhere", legacy="")

        result = classify_module("app", project, BuildDescriptor(""), pom)

        assert result.module_name == "legacy"

    def test_unconfigured_module(self, single_module_repo: Path):
        project = make_project(single_module_repo, core="")
        pom = single_module_repo / "webapp" / "pom.xml"

        with pytest.raises(UnconfiguredModuleError) as exc_info:
            classify_module("app1", project, BuildDescriptor("webapp", "war"), pom)

        error = exc_info.value
        assert error.module_name == "webapp"
        assert "webapp" in error.remediation
        assert "app1" in error.remediation
        assert "modules" in error.remediation


class TestDetect:

    def test_from_source_directory(self, app_config: Config, single_module_repo: Path):
        cwd = single_module_repo / "core" / "src" / "main" / "java"

        detection = detect(cwd, app_config)

        assert detection.project_name == "app1"
        assert detection.descriptor_path == single_module_repo / "core" / "pom.xml"
        assert detection.descriptor.artifact_id == "core"
        assert detection.classification.module_name == "core"
        assert not detection.classification.is_multi_module_build

    def test_multi_module(self, multi_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"mto": project_data(
            multi_module_repo, wildfly_root, modules={"orders": "", "web": ""},
        )}})

        detection = detect(multi_module_repo / "web", config)

        assert detection.project_name == "mto"
        assert detection.classification.repo_root == multi_module_repo
        assert detection.classification.packaging == "war"
        assert detection.classification.relative_module_path == "web"

    def test_outside_projects(self, app_config: Config, tmp_path: Path):
        with pytest.raises(NotInProjectError):
            detect(tmp_path, app_config)

    def test_no_descriptor(self, app_config: Config, single_module_repo: Path):
        # the base path of a single module project has no pom of its own
        with pytest.raises(DescriptorNotFoundError):
            detect(single_module_repo, app_config)

    def test_broken_descriptor(self, app_config: Config, single_module_repo: Path):
        (single_module_repo / "core" / "pom.xml").write_text("<project>")
        with pytest.raises(ParseError):
            detect(single_module_repo / "core", app_config)

    def test_unconfigured(self, single_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"app1": project_data(
            single_module_repo, wildfly_root, modules={"core": ""},
        )}})
        with pytest.raises(UnconfiguredModuleError):
            detect(single_module_repo / "webapp", config)
