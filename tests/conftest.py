"""Shared pytest fixtures for Modularization Dashboard tests."""

import os
import zipfile

import pytest


def manifest_text(attributes):
    lines = ["Manifest-Version: 1.0"]
    lines.extend(f"{key}: {value}" for key, value in attributes.items())
    return "\r\n".join(lines) + "\r\n\r\n"


@pytest.fixture
def m2_repository(tmp_path):
    repository = tmp_path / "home" / ".m2" / "repository"
    repository.mkdir(parents=True)
    return repository


@pytest.fixture
def make_jar(m2_repository):
    """
    Write a JAR into the local repository layout and return its path.

    ``entries`` maps archive names to content; ``manifest`` is a dict of
    main-section attributes (None writes no manifest).
    """

    def _make(group_id, artifact_id, version, entries=None, manifest=None):
        directory = m2_repository.joinpath(*group_id.split("."), artifact_id, version)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{artifact_id}-{version}.jar"
        with zipfile.ZipFile(path, "w") as jar:
            if manifest is not None:
                jar.writestr("META-INF/MANIFEST.MF", manifest_text(manifest))
            for name, content in (entries or {}).items():
                jar.writestr(name, content)
            if not entries and manifest is None:
                jar.writestr("placeholder.txt", "")
        return str(path)

    return _make


@pytest.fixture
def classpath_of():
    def _join(paths):
        return os.pathsep.join(paths)

    return _join
