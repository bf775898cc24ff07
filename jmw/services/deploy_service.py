"""Local deployment service"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..api.exceptions import DeploymentIOError
from ..constants import PROMPT_CONFIRM_DEPLOY
from ..core.deploy_planner import plan_local_deployment
from ..models.classification import Detection
from ..models.config import Settings
from ..models.result import LocalDeployment
from ..utils.file_utils import copy_file
from ..utils.process_utils import CommandError, CommandRunner

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class DeployService:
    """Deploys an artifact to the local WildFly"""

    def __init__(self,
                 settings: Optional[Settings] = None,
                 runner: Optional[CommandRunner] = None):
        self.settings = settings or Settings()
        self.runner = runner or CommandRunner()

    def plan(self, artifact: Union[str, Path], detection: Detection) -> LocalDeployment:
        """Plan the deployment of an existing artifact

        Raises:
            DeploymentIOError: If the artifact does not exist
        """
        artifact = Path(artifact).resolve()
        if not artifact.is_file():
            raise DeploymentIOError(f"Artifact not found: {artifact}")
        return plan_local_deployment(artifact, detection.classification, detection.project)

    def deploy(self, deployment: LocalDeployment, confirm: Confirm) -> bool:
        """Confirm and execute a local deployment

        Returns:
            False when the user declined, True once deployed

        Raises:
            DeploymentIOError: If copying or the jboss-cli call fails
        """
        target = deployment.target_dir if not deployment.command else "domain controller"
        prompt = PROMPT_CONFIRM_DEPLOY.format(artifact=deployment.artifact.name, target=target)
        if not confirm(prompt):
            logger.info("Deployment of %s declined", deployment.artifact.name)
            return False

        if deployment.command:
            if deployment.undeploy:
                # Fails on a first deployment, when nothing is deployed yet
                try:
                    self.runner.run(deployment.undeploy, timeout=self.settings.command_timeout)
                except CommandError as e:
                    logger.warning("Undeploy of %s skipped: %s", deployment.artifact.name, e)
            try:
                self.runner.run(deployment.command, timeout=self.settings.command_timeout)
            except CommandError as e:
                raise DeploymentIOError(f"jboss-cli deployment failed: {e}")
            return True

        try:
            destination = copy_file(deployment.artifact, deployment.target_dir)
            logger.info("Copied %s to %s", deployment.artifact, destination)
            if deployment.marker is not None:
                deployment.marker.touch()
        except OSError as e:
            raise DeploymentIOError(f"Failed to deploy {deployment.artifact.name}: {e}")

        return True
