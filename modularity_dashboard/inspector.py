"""
Module-status inspection of packaged artifacts.

Each artifact is opened as a zip archive and probed for a module
descriptor (at the root or in a multi-release versions directory) and
then for an ``Automatic-Module-Name`` manifest attribute.
"""

import re
import subprocess
import zipfile
import zlib
from typing import Dict, Iterable, List, Optional

from .exceptions import ArtifactUnreadableError
from .logging_config import get_logger
from .models import Dependency, ModuleStatus
from .registry import DependencyRegistry

logger = get_logger('inspector')

MODULE_DESCRIPTOR = "module-info.class"
MANIFEST_PATH = "META-INF/MANIFEST.MF"
AUTOMATIC_MODULE_NAME = "Automatic-Module-Name"

# Lowest release probed in META-INF/versions
MIN_VERSIONED_RELEASE = 10
DEFAULT_MAX_RELEASE = 25

_JAVA_VERSION_PATTERN = re.compile(r'version "(\d+)(?:\.(\d+))?')


def detect_java_release(java_executable: str = "java") -> Optional[int]:
    """
    Return the feature release of the local JVM, or None if there is none.

    ``java -version`` prints e.g. ``openjdk version "21.0.2"`` (or
    ``"1.8.0_392"`` for releases before 9) on stderr.
    """
    try:
        result = subprocess.run([java_executable, '-version'],
                                capture_output=True, text=True, timeout=30)
    except (FileNotFoundError, PermissionError, subprocess.TimeoutExpired):
        return None

    match = _JAVA_VERSION_PATTERN.search(result.stderr or result.stdout or "")
    if not match:
        return None
    major = int(match.group(1))
    if major == 1 and match.group(2):
        return int(match.group(2))
    return major


def parse_manifest(content: str) -> Dict[str, str]:
    """
    Parse JAR manifest text into a flat attribute mapping.

    Continuation lines (starting with a single space) are joined to the
    previous line. Attributes from all sections are collected; the first
    occurrence of a name wins.
    """
    attributes: Dict[str, str] = {}
    logical_lines: List[str] = []
    for raw_line in content.splitlines():
        if raw_line.startswith(' ') and logical_lines:
            logical_lines[-1] += raw_line[1:]
        else:
            logical_lines.append(raw_line)

    for line in logical_lines:
        if ':' not in line:
            continue
        name, value = line.split(':', 1)
        name = name.strip()
        if name and name not in attributes:
            attributes[name] = value.strip()
    return attributes


class ModuleStatusInspector:
    """Classifies dependencies by probing their archives."""

    def __init__(self, max_release: Optional[int] = None):
        """
        Initialize the inspector.

        Args:
            max_release: Highest Java release whose versioned directory is
                probed. Detected from the local JVM when not given.
        """
        if max_release is None:
            max_release = detect_java_release()
            if max_release is None:
                logger.debug(f"No local JVM found, probing versioned entries up to {DEFAULT_MAX_RELEASE}")
                max_release = DEFAULT_MAX_RELEASE
        self.max_release = max(max_release, MIN_VERSIONED_RELEASE)
        self.descriptor_entries = self._descriptor_entries()

    def _descriptor_entries(self) -> List[str]:
        entries = [MODULE_DESCRIPTOR]
        for release in range(self.max_release, MIN_VERSIONED_RELEASE - 1, -1):
            entries.append(f"META-INF/versions/{release}/{MODULE_DESCRIPTOR}")
        return entries

    def inspect(self, dependency: Dependency) -> ModuleStatus:
        """
        Determine the module status of one dependency.

        Raises:
            ArtifactUnreadableError: If the archive is missing, truncated or
                not a zip file
        """
        try:
            with zipfile.ZipFile(dependency.path, 'r') as archive:
                names = set(archive.namelist())

                if any(entry in names for entry in self.descriptor_entries):
                    return ModuleStatus.FULL_MODULE_INFO

                if MANIFEST_PATH in names:
                    manifest = archive.read(MANIFEST_PATH).decode('utf-8', errors='replace')
                    if AUTOMATIC_MODULE_NAME in parse_manifest(manifest):
                        return ModuleStatus.AUTOMATIC_MODULE_NAME

                return ModuleStatus.NO_MODULE_INFO
        except (OSError, EOFError, zipfile.BadZipFile, zipfile.LargeZipFile, zlib.error) as e:
            raise ArtifactUnreadableError(str(e), dependency.path, dependency.coordinate) from e

    def classify(self, dependencies: Iterable[Dependency], errors: Optional[List[str]] = None) -> DependencyRegistry:
        """
        Inspect dependencies one at a time and register the results.

        Unreadable artifacts are registered with ``ModuleStatus.UNREADABLE``
        and their error message is appended to ``errors`` when given.
        """
        registry = DependencyRegistry()
        for dependency in dependencies:
            try:
                status = self.inspect(dependency)
            except ArtifactUnreadableError as e:
                logger.warning(str(e))
                if errors is not None:
                    errors.append(str(e))
                status = ModuleStatus.UNREADABLE
            logger.debug(f"{dependency.gav}: {status.value}")
            registry.add(dependency.with_status(status))

        for group in registry.group_by_status().values():
            if group.status is ModuleStatus.UNREADABLE and not group.count:
                continue
            logger.info(f"{group.status.label}: {group.count}")
        logger.info(f"Total: {registry.total()}")
        return registry
