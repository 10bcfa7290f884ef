"""Tests for DependencyRegistry."""

import pytest

from modularity_dashboard.exceptions import DuplicateCoordinateError
from modularity_dashboard.models import Dependency, ModuleStatus
from modularity_dashboard.registry import DependencyRegistry, percentage


def dep(artifact_id, status, group_id="org.example", version="1.0"):
    return Dependency(
        path=f"/h/.m2/repository/org/example/{artifact_id}/{version}/{artifact_id}-{version}.jar",
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        file_name=f"{artifact_id}-{version}.jar",
        module_status=status,
    )


def registry_with(counts):
    registry = DependencyRegistry()
    index = 0
    for status, count in counts.items():
        for _ in range(count):
            registry.add(dep(f"lib{index}", status))
            index += 1
    return registry


class TestDependencyRegistry:
    def test_add_and_get(self):
        registry = DependencyRegistry()
        registry.add(dep("a", ModuleStatus.FULL_MODULE_INFO))
        assert ("org.example", "a", "1.0") in registry
        assert registry.get(("org.example", "a", "1.0")).module_status == ModuleStatus.FULL_MODULE_INFO
        assert registry.get(("org.example", "b", "1.0")) is None
        assert len(registry) == registry.total() == 1

    def test_rejects_unclassified(self):
        with pytest.raises(ValueError):
            DependencyRegistry().add(dep("a", None))

    def test_duplicate_with_other_status(self):
        registry = DependencyRegistry()
        registry.add(dep("a", ModuleStatus.FULL_MODULE_INFO))
        with pytest.raises(DuplicateCoordinateError) as exc_info:
            registry.add(dep("a", ModuleStatus.NO_MODULE_INFO))
        assert exc_info.value.coordinate == ("org.example", "a", "1.0")

    def test_duplicate_with_same_status_is_kept_once(self):
        registry = DependencyRegistry()
        registry.add(dep("a", ModuleStatus.NO_MODULE_INFO))
        registry.add(dep("a", ModuleStatus.NO_MODULE_INFO))
        assert registry.total() == 1

    def test_same_artifact_other_version_is_distinct(self):
        registry = DependencyRegistry()
        registry.add(dep("a", ModuleStatus.NO_MODULE_INFO, version="1.0"))
        registry.add(dep("a", ModuleStatus.FULL_MODULE_INFO, version="2.0"))
        assert registry.total() == 2

    def test_insertion_order(self):
        registry = DependencyRegistry()
        for name in ["zeta", "alpha", "mid"]:
            registry.add(dep(name, ModuleStatus.NO_MODULE_INFO))
        assert [d.artifact_id for d in registry] == ["zeta", "alpha", "mid"]
        assert [d.artifact_id for d in registry.group_by_status()[ModuleStatus.NO_MODULE_INFO].dependencies] == [
            "zeta", "alpha", "mid"
        ]


class TestGroupByStatus:
    def test_counts_sum_to_total(self):
        registry = registry_with({
            ModuleStatus.NO_MODULE_INFO: 4,
            ModuleStatus.FULL_MODULE_INFO: 2,
            ModuleStatus.UNREADABLE: 1,
        })
        groups = registry.group_by_status()
        assert sum(g.count for g in groups.values()) == registry.total()

    def test_every_status_present(self):
        groups = DependencyRegistry().group_by_status()
        assert set(groups) == set(ModuleStatus)
        assert all(g.count == 0 and g.percentage == 0 for g in groups.values())

    def test_percentages_for_ten(self):
        registry = registry_with({
            ModuleStatus.NO_MODULE_INFO: 3,
            ModuleStatus.AUTOMATIC_MODULE_NAME: 2,
            ModuleStatus.FULL_MODULE_INFO: 5,
        })
        groups = registry.group_by_status()
        assert groups[ModuleStatus.NO_MODULE_INFO].percentage == 30
        assert groups[ModuleStatus.AUTOMATIC_MODULE_NAME].percentage == 20
        assert groups[ModuleStatus.FULL_MODULE_INFO].percentage == 50

    def test_thirds_do_not_sum_to_hundred(self):
        registry = registry_with({
            ModuleStatus.NO_MODULE_INFO: 1,
            ModuleStatus.AUTOMATIC_MODULE_NAME: 1,
            ModuleStatus.FULL_MODULE_INFO: 1,
        })
        groups = registry.group_by_status()
        assert [groups[s].percentage for s in ModuleStatus.main_statuses()] == [33, 33, 33]


class TestPercentage:
    @pytest.mark.parametrize(
        "count,total,expected",
        [(1, 8, 13), (1, 200, 1), (1, 40, 3), (5, 8, 63), (0, 5, 0), (3, 0, 0), (7, 7, 100)],
    )
    def test_rounds_half_up(self, count, total, expected):
        assert percentage(count, total) == expected
