"""
Derives Maven coordinates from paths inside a local repository.

A classpath entry such as::

    /home/me/.m2/repository/org/slf4j/slf4j-api/2.0.9/slf4j-api-2.0.9.jar

yields group ``org.slf4j``, artifact ``slf4j-api`` and version ``2.0.9``.
"""

import os
import re
from typing import List

from .exceptions import MalformedCoordinateError
from .logging_config import get_logger
from .models import Dependency

logger = get_logger('coordinates')

DEFAULT_REPOSITORY_MARKER = ".m2"

_SEPARATOR_PATTERN = re.compile(r'[\\/]')


def parse_coordinate(path: str, marker: str = DEFAULT_REPOSITORY_MARKER) -> Dependency:
    """
    Build an unclassified Dependency from a local repository path.

    Args:
        path: Absolute path of the artifact file
        marker: Directory name that holds the local repository

    Returns:
        Dependency with coordinates filled in and no module status

    Raises:
        MalformedCoordinateError: If the path does not follow
            ``<marker>/repository/<group...>/<artifact>/<version>/<file>``
    """
    segments = [s for s in _SEPARATOR_PATTERN.split(path) if s]
    if marker not in segments:
        raise MalformedCoordinateError(f"marker segment '{marker}' not found", path)

    # The segment after the marker is the repository directory itself
    group_start = segments.index(marker) + 2
    artifact_index = len(segments) - 3
    if artifact_index <= group_start:
        raise MalformedCoordinateError(
            f"expected <group>/<artifact>/<version>/<file> below '{marker}/repository'", path
        )

    return Dependency(
        path=path,
        group_id=".".join(segments[group_start:artifact_index]),
        artifact_id=segments[artifact_index],
        version=segments[-2],
        file_name=segments[-1],
    )


def parse_classpath(classpath: str, separator: str = os.pathsep,
                    marker: str = DEFAULT_REPOSITORY_MARKER) -> List[Dependency]:
    """
    Parse every entry of a classpath string, keeping classpath order.

    Raises:
        MalformedCoordinateError: On the first entry that cannot be parsed
    """
    entries = [entry.strip() for entry in classpath.split(separator)]
    dependencies = [parse_coordinate(entry, marker) for entry in entries if entry]
    logger.debug(f"Parsed {len(dependencies)} classpath entries")
    return dependencies
