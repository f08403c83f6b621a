"""In-memory metadata store."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, List

from mavenhost.modules.artifactrepo.domain import ProjectMetadata
from mavenhost.modules.artifactrepo.repositories.base import ProjectMetadataStore


class InMemoryMetadataStore(ProjectMetadataStore):
    """Keeps metadata in a dict; project content still lives on disk."""

    def __init__(self) -> None:
        self.records: Dict[str, ProjectMetadata] = {}

    def list(self) -> List[str]:
        return sorted(self.records)

    def get(self, name: str) -> ProjectMetadata:
        stored = self.records.get(name)
        return replace(stored) if stored else ProjectMetadata()

    def put(self, name: str, metadata: ProjectMetadata) -> None:
        self.records[name] = replace(metadata)

    def delete(self, name: str) -> None:
        self.records.pop(name, None)
