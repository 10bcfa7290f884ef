"""
In-memory registry of classified dependencies, keyed by coordinate.
"""

from collections import OrderedDict
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterator, List, Optional

from .exceptions import DuplicateCoordinateError
from .logging_config import get_logger
from .models import Coordinate, Dependency, ModuleStatus, StatusGroup

logger = get_logger('registry')


def percentage(count: int, total: int) -> int:
    """Share of ``count`` in ``total`` as a whole percent, rounding halves up."""
    if total <= 0:
        return 0
    return int((Decimal(count) * 100 / Decimal(total)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class DependencyRegistry:
    """
    Classified dependencies in classpath order.

    The three percentages of the main statuses are rounded independently
    and are not guaranteed to sum to 100.
    """

    def __init__(self):
        self._dependencies: 'OrderedDict[Coordinate, Dependency]' = OrderedDict()

    def add(self, dependency: Dependency) -> None:
        """
        Insert a classified dependency.

        Raises:
            ValueError: If the dependency has not been classified
            DuplicateCoordinateError: If the coordinate is already registered
                with a different status
        """
        if not dependency.is_classified:
            raise ValueError(f"Dependency {dependency.gav} has no module status")

        existing = self._dependencies.get(dependency.coordinate)
        if existing is not None:
            if existing.module_status != dependency.module_status:
                raise DuplicateCoordinateError(
                    dependency.coordinate, existing.module_status, dependency.module_status
                )
            logger.warning(f"Ignoring repeated classpath entry for {dependency.gav}: {dependency.path}")
            return

        self._dependencies[dependency.coordinate] = dependency

    def get(self, coordinate: Coordinate) -> Optional[Dependency]:
        return self._dependencies.get(coordinate)

    def __contains__(self, coordinate) -> bool:
        return coordinate in self._dependencies

    def __iter__(self) -> Iterator[Dependency]:
        return iter(self._dependencies.values())

    def __len__(self) -> int:
        return len(self._dependencies)

    def total(self) -> int:
        return len(self._dependencies)

    def by_status(self, status: ModuleStatus) -> List[Dependency]:
        return [dep for dep in self._dependencies.values() if dep.module_status == status]

    def group_by_status(self) -> Dict[ModuleStatus, StatusGroup]:
        """
        Partition the registry by module status.

        Every status is present in the result, in enum order, even when no
        dependency has it. Dependencies keep classpath order within a group.
        """
        total = self.total()
        groups = {}
        for status in ModuleStatus:
            members = self.by_status(status)
            groups[status] = StatusGroup(
                status=status,
                count=len(members),
                percentage=percentage(len(members), total),
                dependencies=members,
            )
        return groups
