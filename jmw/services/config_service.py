"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import CONFIG_FILE_NAME, ENV_CONFIG_PATH, USER_CONFIG_PATH
from ..models.config import Config

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for locating and loading the jmw configuration"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            config_path: Explicit configuration file; searched for if omitted
        """
        self.explicit_path = Path(config_path).expanduser() if config_path else None
        self._config: Optional[Config] = None
        self.config_path: Optional[Path] = None

    @property
    def config(self) -> Config:
        """Get current configuration (lazy load)"""
        if self._config is None:
            self.load_config()
        return self._config

    def candidate_paths(self) -> List[Path]:
        """Configuration files to try, in order"""
        if self.explicit_path:
            return [self.explicit_path]

        candidates = []
        env_path = os.environ.get(ENV_CONFIG_PATH)
        if env_path:
            candidates.append(Path(env_path).expanduser())
        candidates.append(USER_CONFIG_PATH.expanduser())
        candidates.append(Path.cwd() / CONFIG_FILE_NAME)
        return candidates

    def find_config(self) -> Path:
        """Find the configuration file

        Raises:
            ConfigError: If none of the candidates exists
        """
        candidates = self.candidate_paths()
        for path in candidates:
            if path.is_file():
                return path

        raise ConfigError(
            "Config file not found. Looked in:\n"
            + "\n".join(f"  - {p}" for p in candidates)
        )

    def load_config(self) -> Config:
        """Load configuration from file

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        path = self.find_config()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"failed to read config file {path}: {e}")

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"failed to parse config file {path}: {e}")

        try:
            self._config = Config.from_dict(data)
        except ConfigError as e:
            raise ConfigError(f"config validation failed ({path}): {e}")

        self.config_path = path
        logger.debug("Loaded configuration from %s (%d projects)", path, len(self._config.projects))
        return self._config


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """Load the configuration from an explicit path or the default locations"""
    return ConfigService(config_path).load_config()
