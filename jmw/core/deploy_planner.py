"""Local deployment targets and remote deployment instructions"""

import posixpath
from pathlib import Path
from typing import Optional, Tuple, Union

from ..constants import (
    DODEPLOY_SUFFIX,
    JBOSS_CLI,
    REMOTE_STAGING_DIR,
    SERVER_LOG,
    STANDALONE_DEPLOYMENTS_DIR,
)
from ..models.classification import ModuleClassification
from ..models.config import ProjectConfig, RemoteConfig
from ..models.result import InstructionStep, LocalDeployment, RemoteInstructions


def jboss_cli_path(wildfly_root: str) -> Path:
    return Path(wildfly_root) / JBOSS_CLI


def plan_local_deployment(artifact: Union[str, Path],
                          classification: ModuleClassification,
                          project: ProjectConfig) -> LocalDeployment:
    """Decide where an artifact goes on the local WildFly

    Global modules are copied into ``wildfly_root/<deployment_path>``.
    Standalone deployments are copied into the deployments folder with a
    ``.dodeploy`` marker. Domain deployments go through jboss-cli: the
    previous version is undeployed from the server group, then the
    artifact is deployed to it.
    """
    artifact = Path(artifact)
    root = Path(project.wildfly_root)

    if classification.is_global:
        return LocalDeployment(artifact=artifact, target_dir=root / classification.deployment_path)

    if not project.is_domain:
        target_dir = root / STANDALONE_DEPLOYMENTS_DIR
        return LocalDeployment(
            artifact=artifact,
            target_dir=target_dir,
            marker=target_dir / f"{artifact.name}{DODEPLOY_SUFFIX}",
        )

    # jboss-cli rejects --force together with --server-groups
    cli = str(jboss_cli_path(project.wildfly_root))
    group = project.server_group
    return LocalDeployment(
        artifact=artifact,
        target_dir=root / "domain" / "deployments",
        undeploy=(cli, "--connect", f"--command=undeploy {artifact.name} --server-groups={group}"),
        command=(cli, "--connect", f"--command=deploy {artifact} --server-groups={group}"),
    )


def local_restart_command(project: ProjectConfig) -> Tuple[str, ...]:
    """jboss-cli invocation that shuts the local server down for a restart"""
    args = [str(jboss_cli_path(project.wildfly_root)), "--connect"]
    if project.is_domain:
        args.append("controller=localhost")
    args.append("--command=:shutdown")
    return tuple(args)


def select_remote(project: ProjectConfig,
                  client: Optional[str] = None) -> Tuple[Optional[str], Optional[RemoteConfig]]:
    """Pick the remote target for instructions

    An explicit client wins, then the project's default client, then the
    project-level remote.

    Returns:
        (client name or None, remote or None)

    Raises:
        ConfigError: If ``client`` is not configured
    """
    if client:
        return client, project.get_client(client).remote
    if project.default_client:
        return project.default_client, project.get_client(project.default_client).remote
    return None, project.remote


def remote_instructions(artifact: Union[str, Path],
                        classification: ModuleClassification,
                        project: ProjectConfig,
                        remote: RemoteConfig,
                        client: Optional[str] = None) -> RemoteInstructions:
    """Build the copy, redeploy and verify commands for a remote host"""
    artifact = Path(artifact)
    name = artifact.name
    target = remote.target
    wildfly = remote.wildfly_path
    steps = []

    if classification.is_global:
        remote_path = posixpath.join(wildfly, classification.deployment_path)
        steps.append(InstructionStep("Copy artifact", (f"scp {artifact} {target}:{remote_path}",)))
        steps.append(InstructionStep("Restart WildFly", (f'ssh {target} "{remote.restart_cmd}"',)))
    elif not project.is_domain:
        deploy_path = posixpath.join(wildfly, STANDALONE_DEPLOYMENTS_DIR)
        steps.append(InstructionStep("Copy artifact", (f"scp {artifact} {target}:{deploy_path}",)))
        steps.append(InstructionStep(
            "Trigger deployment",
            (f'ssh {target} "touch {posixpath.join(deploy_path, name)}{DODEPLOY_SUFFIX}"',),
        ))
    else:
        cli = posixpath.join(wildfly, JBOSS_CLI)
        group = project.server_group
        staged = posixpath.join(REMOTE_STAGING_DIR, name)
        steps.append(InstructionStep(
            "Copy artifact to remote server",
            (f"scp {artifact} {target}:{REMOTE_STAGING_DIR}/",),
        ))
        steps.append(InstructionStep("Deploy via jboss-cli", (
            f"ssh {target} \"{cli} --connect controller=localhost 'undeploy {name} --server-groups={group}'\"",
            f"ssh {target} \"{cli} --connect controller=localhost 'deploy {staged} --server-groups={group}'\"",
        )))

    log_path = posixpath.join(wildfly, project.wildfly_mode.value, SERVER_LOG)
    steps.append(InstructionStep("Verify deployment", (f'ssh {target} "tail -f {log_path}"',)))

    return RemoteInstructions(target=target, steps=tuple(steps), client=client)
