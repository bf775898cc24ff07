"""Maven command synthesis"""

import logging
from typing import List, Optional, Tuple

from ..api.exceptions import InvalidProfileError
from ..constants import (
    ALSO_MAKE_FLAG,
    DEFAULT_MAVEN_COMMAND,
    MODULE_SELECTOR_FLAG,
    PROFILE_FLAG_PREFIX,
    SKIP_TESTS_FLAG,
)
from ..models.classification import ModuleClassification
from ..models.config import ProjectConfig
from ..models.result import BuildCommand, BuildPlan

logger = logging.getLogger(__name__)


def validate_profile(project: ProjectConfig, profile: Optional[str]) -> None:
    """Reject a requested profile outside the project's allowed set

    An empty ``available_profiles`` means any profile is accepted.

    Raises:
        InvalidProfileError: If the profile is not allowed
    """
    if profile and project.available_profiles and profile not in project.available_profiles:
        raise InvalidProfileError(profile, project.name, project.available_profiles)


def resolve_profiles(project: ProjectConfig, profile: Optional[str] = None) -> Tuple[str, ...]:
    """Resolve the Maven profiles to activate

    Precedence: configured override for the requested name (the empty
    string when none was requested), then the requested name itself,
    then the project default, then nothing.

    Raises:
        InvalidProfileError: If the profile is not allowed
    """
    profile = profile or ""
    validate_profile(project, profile)

    if profile in project.profile_overrides:
        return tuple(project.profile_overrides[profile])
    if profile:
        return (profile,)
    if project.default_profile:
        return (project.default_profile,)
    return ()


def synthesize_build(classification: ModuleClassification,
                     project: ProjectConfig,
                     profile: Optional[str] = None,
                     skip_tests: bool = False,
                     maven_command: str = DEFAULT_MAVEN_COMMAND) -> BuildPlan:
    """Build the Maven invocation(s) for a classified module

    Multi-module builds run ``package`` from the repository root with a
    module selector and ``-am``; jar modules then get a narrower
    ``install`` so sibling modules can resolve them. Single-module builds
    run ``install`` for jars and ``package`` otherwise.

    Args:
        classification: Module to build
        project: Project configuration
        profile: Requested profile, empty for none
        skip_tests: Skip tests even if the project does not
        maven_command: Maven executable

    Returns:
        Build plan

    Raises:
        InvalidProfileError: If the profile is not allowed
    """
    profiles = resolve_profiles(project, profile)
    skip = project.skip_tests or skip_tests

    args: List[str] = [maven_command, "clean"]
    install = None

    if classification.is_multi_module_build:
        selector = classification.relative_module_path
        args += ["package", MODULE_SELECTOR_FLAG, selector, ALSO_MAKE_FLAG]
        working_dir = classification.repo_root

        if classification.packaging == "jar":
            install = BuildCommand(
                args=(maven_command, "install", MODULE_SELECTOR_FLAG, selector, SKIP_TESTS_FLAG),
                working_dir=working_dir,
                label="install",
            )
    else:
        args.append("install" if classification.packaging == "jar" else "package")
        working_dir = classification.module_path

    args += [f"{PROFILE_FLAG_PREFIX}{p}" for p in profiles]
    if skip:
        args.append(SKIP_TESTS_FLAG)

    plan = BuildPlan(
        primary=BuildCommand(args=tuple(args), working_dir=working_dir),
        install=install,
        profiles=profiles,
        skip_tests=skip,
    )
    logger.debug("Build plan for %s: %s", classification.module_name,
                 " && ".join(str(c) for c in plan.commands))
    return plan
