"""Conversion between request paths and Maven coordinates."""

from __future__ import annotations

from typing import Dict

from mavenhost.modules.artifactrepo.domain import ArtifactCoordinate
from mavenhost.modules.artifactrepo.exceptions import BadPath

MIN_SEGMENTS = 4


def parse_path(url_path: str) -> ArtifactCoordinate:
    """Split ``group/.../artifact/version/filename`` into a coordinate.

    Character sets are not validated here; the project lookup by artifactId
    decides whether the coordinate exists.
    """
    segments = url_path.strip("/").split("/")
    if len(segments) < MIN_SEGMENTS:
        raise BadPath(url_path)
    return ArtifactCoordinate(
        group_id=".".join(segments[:-3]),
        artifact_id=segments[-3],
        version=segments[-2],
        filename=segments[-1],
    )


def build_maven_path(group_id: str, artifact_id: str, version: str) -> str:
    return ArtifactCoordinate(group_id=group_id, artifact_id=artifact_id, version=version).maven_path


def build_dependency_blocks(group_id: str, artifact_id: str, version: str) -> Dict[str, str]:
    """Dependency declarations for Maven and Gradle, for display only."""
    maven = (
        "<dependency>\n"
        f"  <groupId>{group_id}</groupId>\n"
        f"  <artifactId>{artifact_id}</artifactId>\n"
        f"  <version>{version}</version>\n"
        "</dependency>"
    )
    gradle = f"implementation '{group_id}:{artifact_id}:{version}'"
    return {"maven": maven, "gradle": gradle}
