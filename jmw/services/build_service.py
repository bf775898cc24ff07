"""Build execution service"""

import logging
from typing import Callable, Optional

from ..api.exceptions import BuildExecutionError
from ..constants import PROMPT_CONFIRM_BUILD
from ..models.classification import Detection
from ..models.config import Settings
from ..models.result import BuildOutcome, BuildPlan
from ..utils.file_utils import find_artifact
from ..utils.process_utils import CommandError, CommandRunner

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class BuildService:
    """Runs a synthesized build plan"""

    def __init__(self,
                 settings: Optional[Settings] = None,
                 runner: Optional[CommandRunner] = None):
        """Initialize build service

        Args:
            settings: Tool settings (timeouts)
            runner: Process runner, replaceable in tests
        """
        self.settings = settings or Settings()
        self.runner = runner or CommandRunner()

    def run(self, plan: BuildPlan, detection: Detection, confirm: Confirm) -> BuildOutcome:
        """Confirm and execute a build plan

        The install step of a multi-module jar build only runs after the
        main build succeeded.

        Args:
            plan: Commands to run
            detection: Detected project and module
            confirm: Confirmation capability

        Returns:
            Outcome with the discovered artifact, or ``executed=False``
            when the user declined

        Raises:
            BuildExecutionError: If a command fails
        """
        if not confirm(PROMPT_CONFIRM_BUILD):
            logger.info("Build of %s declined", detection.classification.module_name)
            return BuildOutcome(executed=False)

        for command in plan.commands:
            try:
                self.runner.run(command.args, cwd=command.working_dir,
                                timeout=self.settings.build_timeout)
            except CommandError as e:
                raise BuildExecutionError(f"{command.label} failed: {e}")

        artifact = find_artifact(detection.classification.target_dir)
        if artifact is None:
            logger.warning("No artifact found in %s", detection.classification.target_dir)
        return BuildOutcome(executed=True, artifact=artifact)
