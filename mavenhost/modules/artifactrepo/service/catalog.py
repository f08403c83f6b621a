"""Listings of hosted projects and the artifacts they expose."""

from __future__ import annotations

from typing import Any, Dict, List

from mavenhost.modules.artifactrepo.coordinates import build_dependency_blocks, build_maven_path
from mavenhost.modules.artifactrepo.domain import DEFAULT_VERSION, Project
from mavenhost.modules.artifactrepo.service.base import BaseService
from mavenhost.modules.artifactrepo.store import ProjectStore
from mavenhost.settings import Settings


class ArtifactCatalog(BaseService):
    def __init__(self, settings: Settings, store: ProjectStore) -> None:
        super().__init__(settings)
        self.store = store

    def list_artifacts(self) -> List[Dict[str, Any]]:
        group_id = self.settings.default_group_id
        artifacts = []
        for project in self.store.list():
            version = project.metadata.version or DEFAULT_VERSION
            artifacts.append(
                {
                    "name": project.name,
                    "groupId": group_id,
                    "artifactId": project.name,
                    "version": version,
                    "sourceRootRelativePath": project.metadata.source_root,
                    "mavenPath": build_maven_path(group_id, project.name, version),
                    "dependencyDeclarationBlocks": build_dependency_blocks(group_id, project.name, version),
                }
            )
        return artifacts

    def list_projects(self) -> List[Dict[str, Any]]:
        """Project summaries, most recently uploaded first."""
        summaries = [self._summary(project) for project in self.store.list()]
        summaries.sort(key=lambda item: item["uploadedAt"], reverse=True)
        return summaries

    @staticmethod
    def _summary(project: Project) -> Dict[str, Any]:
        meta = project.metadata
        return {
            "name": project.name,
            "uploadedAt": meta.uploaded_at or project.modified_at.isoformat().replace("+00:00", "Z"),
            "sourceRootRelativePath": meta.source_root,
            "originalFilename": meta.original_filename or project.name,
            "uploadedBy": meta.uploaded_by or "unknown",
            "version": meta.version or DEFAULT_VERSION,
            "upstreamUrl": meta.upstream_url,
        }
