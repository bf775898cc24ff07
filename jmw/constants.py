"""Global constants for jmw"""

from enum import Enum
from pathlib import Path

APP_NAME = "jmw"
LOG_FORMAT = "%(message)s"

# Configuration lookup
CONFIG_FILE_NAME = "config.yaml"
USER_CONFIG_PATH = Path("~/.config/jmw") / CONFIG_FILE_NAME
ENV_CONFIG_PATH = "JMW_CONFIG"

# Maven
DESCRIPTOR_FILE = "pom.xml"
DEFAULT_MAVEN_COMMAND = "mvn"
DEFAULT_PACKAGING = "jar"
TARGET_DIR = "target"
SKIP_TESTS_FLAG = "-DskipTests"
PROFILE_FLAG_PREFIX = "-P"
MODULE_SELECTOR_FLAG = "-pl"
ALSO_MAKE_FLAG = "-am"

# Artifact extensions
JAR_EXTENSION = ".jar"
WAR_EXTENSION = ".war"
IGNORED_JAR_MARKERS = ("sources", "javadoc")

# WildFly layout
STANDALONE_DEPLOYMENTS_DIR = "standalone/deployments"
DODEPLOY_SUFFIX = ".dodeploy"
JBOSS_CLI = "bin/jboss-cli.sh"
SERVER_LOG = "log/server.log"
REMOTE_STAGING_DIR = "/tmp"

# Timeouts (seconds)
DEFAULT_BUILD_TIMEOUT = 1800
DEFAULT_COMMAND_TIMEOUT = 120


class WildFlyMode(Enum):
    STANDALONE = "standalone"
    DOMAIN = "domain"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "JMW001"
    NOT_IN_PROJECT = "JMW002"
    DESCRIPTOR_NOT_FOUND = "JMW003"
    DESCRIPTOR_PARSE_ERROR = "JMW004"
    UNCONFIGURED_MODULE = "JMW005"
    INVALID_PROFILE = "JMW006"
    BUILD_FAILED = "JMW007"
    DEPLOYMENT_FAILED = "JMW008"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_WARNING = "⚠"
EMOJI_INFO = "ℹ"
EMOJI_ARROW = "→"
EMOJI_PACKAGE = "📦"

# Interactive prompts
PROMPT_CONFIRM_BUILD = "Proceed with build?"
PROMPT_CONFIRM_DEPLOY = "Deploy {artifact} to {target}?"
