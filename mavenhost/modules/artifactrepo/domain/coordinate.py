"""Maven coordinate derived from a request path or a project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import DEFAULT_VERSION


@dataclass
class ArtifactCoordinate:
    """Represents a Maven artifact coordinate plus the requested file."""

    group_id: str
    artifact_id: str
    version: str = DEFAULT_VERSION
    filename: str = ""

    @property
    def group_path(self) -> str:
        return self.group_id.replace(".", "/")

    @property
    def path_segments(self) -> List[str]:
        segments = [self.group_path, self.artifact_id, self.version]
        if self.filename:
            segments.append(self.filename)
        return segments

    @property
    def maven_path(self) -> str:
        return "/" + "/".join([self.group_path, self.artifact_id, self.version])
