"""Key-value contract for project metadata persistence."""

from __future__ import annotations

from typing import List

from mavenhost.modules.artifactrepo.domain import ProjectMetadata


class ProjectMetadataStore:
    """Name-keyed metadata storage; the filesystem sidecar is the default backend."""

    def list(self) -> List[str]:
        raise NotImplementedError

    def get(self, name: str) -> ProjectMetadata:
        raise NotImplementedError

    def put(self, name: str, metadata: ProjectMetadata) -> None:
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError
