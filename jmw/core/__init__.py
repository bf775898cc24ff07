"""Decision engine for jmw"""

from .path_resolver import PathResolver, find_descriptor, has_descriptor, is_within
from .descriptor_parser import parse_descriptor, read_descriptor
from .module_classifier import classify_module
from .detector import detect
from .build_synthesizer import resolve_profiles, synthesize_build, validate_profile
from .restart_engine import determine_restart
from .deploy_planner import (
    plan_local_deployment,
    local_restart_command,
    select_remote,
    remote_instructions,
)

__all__ = [
    "PathResolver",
    "find_descriptor",
    "has_descriptor",
    "is_within",
    "parse_descriptor",
    "read_descriptor",
    "classify_module",
    "detect",
    "resolve_profiles",
    "synthesize_build",
    "validate_profile",
    "determine_restart",
    "plan_local_deployment",
    "local_restart_command",
    "select_remote",
    "remote_instructions",
]
