"""Restart severity rules"""

from ..constants import JAR_EXTENSION, WAR_EXTENSION
from ..models.classification import ModuleClassification
from ..models.config import RestartRuleSet
from ..models.result import RestartAdvice, Severity

REASON_GLOBAL_MODULE = "global module modification"
REASON_EJB_JAR = "EJB implementation jar"
REASON_WAR_HOT_DEPLOY = "war hot-deployment"
REASON_STANDARD = "standard deployment"


def _fallback(artifact_name: str, classification: ModuleClassification) -> RestartAdvice:
    if classification.is_global:
        return RestartAdvice(Severity.REQUIRED, REASON_GLOBAL_MODULE)
    if artifact_name.endswith(JAR_EXTENSION) and "EJB" in artifact_name:
        return RestartAdvice(Severity.RECOMMENDED, REASON_EJB_JAR)
    if artifact_name.endswith(WAR_EXTENSION):
        return RestartAdvice(Severity.NONE, REASON_WAR_HOT_DEPLOY)
    return RestartAdvice(Severity.RECOMMENDED, REASON_STANDARD)


def determine_restart(artifact_name: str,
                      classification: ModuleClassification,
                      rules: RestartRuleSet) -> RestartAdvice:
    """Decide whether deploying ``artifact_name`` needs a server restart

    Rules are evaluated in order and the first applicable one wins:
    the global module override, then the built-in heuristics when no
    patterns are configured, then the configured patterns (searched, not
    anchored; malformed ones never match), then the war/standard default.
    """
    if classification.is_global and rules.global_module:
        return RestartAdvice(Severity.REQUIRED, REASON_GLOBAL_MODULE)

    if not rules.patterns:
        return _fallback(artifact_name, classification)

    for pattern in rules.patterns:
        matcher = pattern.matcher
        if matcher is not None and matcher.search(artifact_name):
            return RestartAdvice(pattern.severity, pattern.reason)

    if artifact_name.endswith(WAR_EXTENSION):
        return RestartAdvice(Severity.NONE, REASON_WAR_HOT_DEPLOY)
    return RestartAdvice(Severity.RECOMMENDED, REASON_STANDARD)
