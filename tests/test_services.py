"""
Tests for the build and deploy services with a recording process runner.
"""

import sys
from pathlib import Path

import pytest

from jmw.api.exceptions import BuildExecutionError, DeploymentIOError
from jmw.cli.utils.interactive import always
from jmw.core import detect, synthesize_build
from jmw.models import Config, Settings
from jmw.services import BuildService, DeployService
from jmw.utils.file_utils import find_artifact, list_artifacts
from jmw.utils.process_utils import CommandError, CommandRunner
from tests.helpers import FakeRunner, project_data


@pytest.fixture
def core_detection(app_config: Config, single_module_repo: Path):
    return detect(single_module_repo / "core", app_config)


def add_target(module: Path, *names: str) -> Path:
    target = module / "target"
    target.mkdir(exist_ok=True)
    for name in names:
        (target / name).write_bytes(b"PK")
    return target


class TestBuildService:

    def test_runs_plan_and_finds_artifact(self, core_detection, fake_runner: FakeRunner):
        target = add_target(core_detection.classification.module_path,
                            "core-1.0.jar", "core-1.0-sources.jar")
        plan = synthesize_build(core_detection.classification, core_detection.project)
        service = BuildService(Settings(build_timeout=60), fake_runner)

        outcome = service.run(plan, core_detection, always(True))

        assert outcome.executed
        assert outcome.artifact == target / "core-1.0.jar"
        assert fake_runner.calls == [
            (("mvn", "clean", "install"), core_detection.classification.module_path, 60),
        ]

    def test_declined(self, core_detection, fake_runner: FakeRunner):
        plan = synthesize_build(core_detection.classification, core_detection.project)
        outcome = BuildService(runner=fake_runner).run(plan, core_detection, always(False))
        assert not outcome.executed
        assert fake_runner.calls == []

    def test_install_step_runs_after_package(self, multi_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"mto": project_data(
            multi_module_repo, wildfly_root, modules={"orders": ""},
        )}})
        detection = detect(multi_module_repo / "services" / "orders", config)
        plan = synthesize_build(detection.classification, detection.project)
        runner = FakeRunner()

        BuildService(runner=runner).run(plan, detection, always(True))

        assert [call[0][2] for call in runner.calls] == ["package", "-pl"]
        assert runner.calls[1][0] == ("mvn", "install", "-pl", "services/orders", "-DskipTests")
        assert all(call[1] == multi_module_repo for call in runner.calls)

    def test_failure_stops_the_plan(self, multi_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"mto": project_data(
            multi_module_repo, wildfly_root, modules={"orders": ""},
        )}})
        detection = detect(multi_module_repo / "services" / "orders", config)
        plan = synthesize_build(detection.classification, detection.project)
        runner = FakeRunner(fail_on="package", error=CommandError("exited with status 1", 1))

        with pytest.raises(BuildExecutionError, match="build failed: exited with status 1"):
            BuildService(runner=runner).run(plan, detection, always(True))
        assert len(runner.calls) == 1

    def test_default_settings_bound_the_build(self, app_config: Config, core_detection,
                                              fake_runner: FakeRunner):
        plan = synthesize_build(core_detection.classification, core_detection.project)

        BuildService(app_config.settings, fake_runner).run(plan, core_detection, always(True))

        timeout = fake_runner.calls[0][2]
        assert timeout is not None
        assert timeout == 1800

    def test_no_artifact(self, core_detection, fake_runner: FakeRunner):
        plan = synthesize_build(core_detection.classification, core_detection.project)
        outcome = BuildService(runner=fake_runner).run(plan, core_detection, always(True))
        assert outcome.executed
        assert outcome.artifact is None


class TestDeployService:

    def test_standalone_copy_and_marker(self, core_detection, wildfly_root: Path):
        target = add_target(core_detection.classification.module_path, "core-1.0.jar")
        service = DeployService()

        deployment = service.plan(target / "core-1.0.jar", core_detection)
        assert service.deploy(deployment, always(True))

        deployments = wildfly_root / "standalone" / "deployments"
        assert (deployments / "core-1.0.jar").read_bytes() == b"PK"
        assert (deployments / "core-1.0.jar.dodeploy").exists()

    def test_global_module_copy(self, app_config: Config, single_module_repo: Path, wildfly_root: Path):
        detection = detect(single_module_repo / "auth", app_config)
        target = add_target(single_module_repo / "auth", "auth.jar")
        service = DeployService()

        assert service.deploy(service.plan(target / "auth.jar", detection), always(True))

        assert (wildfly_root / "modules" / "org" / "auth" / "main" / "auth.jar").exists()
        assert not (wildfly_root / "standalone").exists()

    def test_declined(self, core_detection, wildfly_root: Path):
        target = add_target(core_detection.classification.module_path, "core-1.0.jar")
        service = DeployService()

        assert not service.deploy(service.plan(target / "core-1.0.jar", core_detection), always(False))
        assert not (wildfly_root / "standalone").exists()

    def test_missing_artifact(self, core_detection, tmp_path: Path):
        with pytest.raises(DeploymentIOError, match="Artifact not found"):
            DeployService().plan(tmp_path / "ghost.war", core_detection)

    def test_domain_runs_jboss_cli(self, single_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"app1": project_data(
            single_module_repo, wildfly_root, wildfly_mode="domain", server_group="main-server-group",
        )}})
        detection = detect(single_module_repo / "webapp", config)
        target = add_target(single_module_repo / "webapp", "webapp.war")
        runner = FakeRunner()
        service = DeployService(Settings(command_timeout=30), runner)

        assert service.deploy(service.plan(target / "webapp.war", detection), always(True))

        cli = str(wildfly_root / "bin" / "jboss-cli.sh")
        assert runner.calls == [
            ((cli, "--connect", "--command=undeploy webapp.war --server-groups=main-server-group"), None, 30),
            ((cli, "--connect", f"--command=deploy {(target / 'webapp.war').resolve()} --server-groups=main-server-group"),
             None, 30),
        ]

    def test_domain_first_deployment(self, single_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"app1": project_data(
            single_module_repo, wildfly_root, wildfly_mode="domain", server_group="main-server-group",
        )}})
        detection = detect(single_module_repo / "webapp", config)
        target = add_target(single_module_repo / "webapp", "webapp.war")
        undeploy = "--command=undeploy webapp.war --server-groups=main-server-group"
        runner = FakeRunner(fail_on=undeploy, error=CommandError("WFLYCTL0216: not found"))
        service = DeployService(runner=runner)

        assert service.deploy(service.plan(target / "webapp.war", detection), always(True))
        assert len(runner.calls) == 2
        assert runner.calls[1][0][2].startswith("--command=deploy ")

    def test_domain_failure(self, single_module_repo: Path, wildfly_root: Path):
        config = Config.from_dict({"projects": {"app1": project_data(
            single_module_repo, wildfly_root, wildfly_mode="domain", server_group="main-server-group",
        )}})
        detection = detect(single_module_repo / "webapp", config)
        target = add_target(single_module_repo / "webapp", "webapp.war")
        runner = FakeRunner(fail_on="--connect", error=CommandError("command not found: jboss-cli.sh"))
        service = DeployService(runner=runner)

        with pytest.raises(DeploymentIOError, match="jboss-cli deployment failed"):
            service.deploy(service.plan(target / "webapp.war", detection), always(True))


class TestArtifacts:

    def test_war_wins(self, tmp_path: Path):
        add_target(tmp_path, "lib.jar", "app.war")
        assert find_artifact(tmp_path / "target").name == "app.war"

    def test_sources_and_javadoc_skipped(self, tmp_path: Path):
        add_target(tmp_path, "core.jar", "core-javadoc.jar", "core-sources.jar", "notes.txt")
        assert [p.name for p in list_artifacts(tmp_path / "target")] == ["core.jar"]

    def test_missing_target(self, tmp_path: Path):
        assert find_artifact(tmp_path / "target") is None


class TestCommandRunner:

    def test_success(self, tmp_path: Path):
        CommandRunner().run([sys.executable, "-c", "open('ran', 'w').close()"], cwd=tmp_path, timeout=30)
        assert (tmp_path / "ran").exists()

    def test_non_zero_exit(self):
        with pytest.raises(CommandError) as exc_info:
            CommandRunner().run([sys.executable, "-c", "import sys; sys.exit(3)"], timeout=30)
        assert exc_info.value.returncode == 3
        assert "exited with status 3" in str(exc_info.value)

    def test_missing_executable(self):
        with pytest.raises(CommandError, match="command not found"):
            CommandRunner().run(["jmw-no-such-binary"])

    def test_timeout(self):
        with pytest.raises(CommandError, match="timed out"):
            CommandRunner().run([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2)
