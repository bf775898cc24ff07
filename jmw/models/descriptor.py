"""Build descriptor model"""

from dataclasses import dataclass
from typing import Tuple

from ..constants import DEFAULT_PACKAGING


@dataclass(frozen=True)
class BuildDescriptor:
    """The parts of a pom.xml the decision engine cares about"""

    artifact_id: str
    packaging: str = DEFAULT_PACKAGING
    modules: Tuple[str, ...] = ()

    @property
    def is_aggregator(self) -> bool:
        """Whether the descriptor declares sub-modules"""
        return bool(self.modules)
