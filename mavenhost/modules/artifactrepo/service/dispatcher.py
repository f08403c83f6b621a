"""Map Maven repository requests onto hosted projects."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from mavenhost.modules.artifactrepo.metadata import checksum, metadata_xml, pom_xml
from mavenhost.modules.artifactrepo.coordinates import parse_path
from mavenhost.modules.artifactrepo.domain import DEFAULT_VERSION, ArtifactCoordinate, Project, SIDECAR_FILENAME
from mavenhost.modules.artifactrepo.domain.constants import (
    ARCHIVE_SUFFIXES,
    CHECKSUM_SUFFIXES,
    JAVA_ARCHIVE_MEDIA_TYPE,
    METADATA_FILENAME,
    POM_SUFFIX,
    TEXT_MEDIA_TYPE,
    XML_MEDIA_TYPE,
)
from mavenhost.modules.artifactrepo.exceptions import ProjectNotFound
from mavenhost.modules.artifactrepo.packager import ArtifactPackager
from mavenhost.modules.artifactrepo.store import ProjectStore


@dataclass
class ArtifactResponse:
    """Either an in-memory body or a file on disk to stream back."""

    media_type: Optional[str]
    body: Optional[bytes] = None
    file_path: Optional[Path] = None
    headers: Dict[str, str] = field(default_factory=dict)


class RepositoryDispatcher:
    """Resolve one repository request; nothing is cached between calls.

    Synthesized responses (metadata, checksum, archive, POM) are tried before
    falling back to serving a literal file from the project.
    """

    def __init__(
        self,
        store: ProjectStore,
        packager: Optional[ArtifactPackager] = None,
        default_group_id: str = "com.example",
    ) -> None:
        self.store = store
        self.packager = packager or ArtifactPackager()
        self.default_group_id = default_group_id
        self.log = logging.getLogger(self.__class__.__name__)

    def dispatch(self, url_path: str) -> ArtifactResponse:
        coords = parse_path(url_path)
        filename = coords.filename

        if filename == METADATA_FILENAME:
            return self._metadata(coords)

        for suffix, algorithm in CHECKSUM_SUFFIXES.items():
            if filename.endswith(suffix):
                return self._checksum(coords, algorithm)

        project = self.store.get(coords.artifact_id)

        if filename.endswith(ARCHIVE_SUFFIXES):
            return self._archive(project, filename)

        if filename.endswith(POM_SUFFIX):
            body = pom_xml(self._group(coords), coords.artifact_id, self._version(coords))
            return ArtifactResponse(media_type=XML_MEDIA_TYPE, body=body.encode("utf-8"))

        return self._direct_file(project, filename)

    def _group(self, coords: ArtifactCoordinate) -> str:
        return coords.group_id or self.default_group_id

    @staticmethod
    def _version(coords: ArtifactCoordinate) -> str:
        return coords.version or DEFAULT_VERSION

    def _metadata(self, coords: ArtifactCoordinate) -> ArtifactResponse:
        body = metadata_xml(self._group(coords), coords.artifact_id, self._version(coords))
        return ArtifactResponse(media_type=XML_MEDIA_TYPE, body=body.encode("utf-8"))

    def _checksum(self, coords: ArtifactCoordinate, algorithm: str) -> ArtifactResponse:
        project = self.store.get(coords.artifact_id)
        digest = checksum(project.name, project.modified_millis, algorithm)
        return ArtifactResponse(media_type=TEXT_MEDIA_TYPE, body=digest.encode("ascii"))

    def _archive(self, project: Project, filename: str) -> ArtifactResponse:
        root = self.store.source_root(project)
        self.log.info("Packaging project=%s root=%s as %s", project.name, root, filename)
        data = self.packager.pack(root)
        return ArtifactResponse(
            media_type=JAVA_ARCHIVE_MEDIA_TYPE,
            body=data,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    def _direct_file(self, project: Project, filename: str) -> ArtifactResponse:
        if filename == SIDECAR_FILENAME:
            raise ProjectNotFound(filename)
        base = project.path.resolve()
        for directory in (project.path, self.store.source_root(project)):
            candidate = (directory / filename).resolve()
            if candidate.is_file() and candidate.is_relative_to(base):
                return ArtifactResponse(media_type=None, file_path=candidate)
        raise ProjectNotFound(f"{project.name}/{filename}")
