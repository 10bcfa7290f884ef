"""
Core data models for the Modularization Dashboard.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .registry import DependencyRegistry

Coordinate = Tuple[str, str, str]


class ModuleStatus(Enum):
    """Level of Java Module System adoption of a packaged artifact."""
    NO_MODULE_INFO = "no_module_info"
    AUTOMATIC_MODULE_NAME = "automatic_module_name"
    FULL_MODULE_INFO = "full_module_info"
    UNREADABLE = "unreadable"  # archive could not be inspected

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @classmethod
    def main_statuses(cls) -> List['ModuleStatus']:
        """The three classification buckets, in display order."""
        return [cls.NO_MODULE_INFO, cls.AUTOMATIC_MODULE_NAME, cls.FULL_MODULE_INFO]


_LABELS = {
    ModuleStatus.NO_MODULE_INFO: "No module info",
    ModuleStatus.AUTOMATIC_MODULE_NAME: "Automatic module name",
    ModuleStatus.FULL_MODULE_INFO: "Full module info",
    ModuleStatus.UNREADABLE: "Unreadable",
}

# Nord palette
_COLORS = {
    ModuleStatus.NO_MODULE_INFO: "#BF616A",
    ModuleStatus.AUTOMATIC_MODULE_NAME: "#EBCB8B",
    ModuleStatus.FULL_MODULE_INFO: "#A3BE8C",
    ModuleStatus.UNREADABLE: "#D8DEE9",
}


@dataclass(frozen=True)
class Dependency:
    """One resolved artifact from the classpath."""
    path: str
    group_id: str
    artifact_id: str
    version: str
    file_name: str
    module_status: Optional[ModuleStatus] = None  # unset until classified

    @property
    def coordinate(self) -> Coordinate:
        return (self.group_id, self.artifact_id, self.version)

    @property
    def gav(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    @property
    def display_name(self) -> str:
        return f"{self.group_id}/{self.artifact_id}@{self.version}"

    @property
    def is_classified(self) -> bool:
        return self.module_status is not None

    def with_status(self, status: ModuleStatus) -> 'Dependency':
        """Return a classified copy of this dependency."""
        return replace(self, module_status=status)


@dataclass
class StatusGroup:
    """Dependencies sharing one module status."""
    status: ModuleStatus
    count: int
    percentage: int
    dependencies: List[Dependency] = field(default_factory=list)


@dataclass
class AnnotatedTree:
    """A dependency tree rewritten with status markup."""
    variant: str  # "plain" or "verbose"
    text: str
    match_count: int = 0


@dataclass
class DashboardResult:
    """Everything the report renderers need for one run."""
    registry: 'DependencyRegistry'
    plain_tree: AnnotatedTree
    verbose_tree: Optional[AnnotatedTree] = None
    errors: List[str] = field(default_factory=list)
    project_name: Optional[str] = None
    processing_time: float = 0.0
