"""Tests for coordinate parsing from local repository paths."""

import os

import pytest

from modularity_dashboard.coordinates import parse_classpath, parse_coordinate
from modularity_dashboard.exceptions import MalformedCoordinateError


class TestParseCoordinate:
    def test_spring_style_path(self):
        dep = parse_coordinate(
            "/home/me/.m2/repository/org/springframework/boot/spring-boot/3.1.0/spring-boot-3.1.0.jar"
        )
        assert dep.group_id == "org.springframework.boot"
        assert dep.artifact_id == "spring-boot"
        assert dep.version == "3.1.0"
        assert dep.file_name == "spring-boot-3.1.0.jar"
        assert dep.module_status is None

    @pytest.mark.parametrize(
        "group_id,artifact_id,version",
        [
            ("com.g", "art", "2.0"),
            ("io.netty", "netty-transport-native-epoll", "4.1.100.Final"),
            ("jakarta.annotation", "jakarta.annotation-api", "2.1.1"),
            ("org", "single-segment-group", "1.0-SNAPSHOT"),
        ],
    )
    def test_round_trips_constructed_path(self, group_id, artifact_id, version):
        file_name = f"{artifact_id}-{version}.jar"
        path = "/".join(
            ["", "users", "ci", ".m2", "repository", *group_id.split("."), artifact_id, version, file_name]
        )
        dep = parse_coordinate(path)
        assert dep.coordinate == (group_id, artifact_id, version)
        assert dep.file_name == file_name
        assert dep.path == path

    def test_windows_separators(self):
        dep = parse_coordinate(r"C:\Users\me\.m2\repository\org\slf4j\slf4j-api\2.0.9\slf4j-api-2.0.9.jar")
        assert dep.coordinate == ("org.slf4j", "slf4j-api", "2.0.9")

    def test_custom_marker(self):
        dep = parse_coordinate("/cache/maven/repository/org/a/lib/1.0/lib-1.0.jar", marker="maven")
        assert dep.coordinate == ("org.a", "lib", "1.0")

    def test_missing_marker(self):
        with pytest.raises(MalformedCoordinateError) as exc_info:
            parse_coordinate("/opt/libs/org/a/lib/1.0/lib-1.0.jar")
        assert exc_info.value.path == "/opt/libs/org/a/lib/1.0/lib-1.0.jar"
        assert ".m2" in str(exc_info.value)

    def test_too_few_segments(self):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate("/home/me/.m2/repository/lib/1.0/lib-1.0.jar")

    def test_marker_as_last_segments(self):
        with pytest.raises(MalformedCoordinateError):
            parse_coordinate("/home/me/.m2/repository")


class TestParseClasspath:
    def test_keeps_order_and_skips_blanks(self):
        paths = [
            "/h/.m2/repository/org/b/beta/1.0/beta-1.0.jar",
            "/h/.m2/repository/org/a/alpha/2.0/alpha-2.0.jar",
        ]
        text = os.pathsep.join(paths) + os.pathsep + "\n"
        deps = parse_classpath(text)
        assert [d.artifact_id for d in deps] == ["beta", "alpha"]

    def test_explicit_separator(self):
        deps = parse_classpath(
            "/h/.m2/repository/org/a/alpha/2.0/alpha-2.0.jar;/h/.m2/repository/org/b/beta/1.0/beta-1.0.jar",
            separator=";",
        )
        assert len(deps) == 2

    def test_empty_classpath(self):
        assert parse_classpath("") == []

    def test_one_bad_entry_fails_the_whole_classpath(self):
        text = os.pathsep.join(["/h/.m2/repository/org/a/alpha/2.0/alpha-2.0.jar", "/tmp/classes"])
        with pytest.raises(MalformedCoordinateError):
            parse_classpath(text)
