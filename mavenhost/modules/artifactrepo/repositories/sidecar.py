"""Metadata stored as a JSON sidecar inside each project directory."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from mavenhost.modules.artifactrepo.domain import ProjectMetadata, SIDECAR_FILENAME
from mavenhost.modules.artifactrepo.domain.constants import PROJECT_NAME_PATTERN
from mavenhost.modules.artifactrepo.repositories.base import ProjectMetadataStore

log = logging.getLogger(__name__)


class SidecarMetadataStore(ProjectMetadataStore):
    """Reads and writes ``<projects_dir>/<name>/.project-meta.json``.

    The project list is simply the directory listing of ``projects_dir``.
    """

    def __init__(self, projects_dir: Path) -> None:
        self.projects_dir = Path(projects_dir)

    def sidecar_path(self, name: str) -> Path:
        return self.projects_dir / name / SIDECAR_FILENAME

    def list(self) -> List[str]:
        if not self.projects_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in self.projects_dir.iterdir()
            if entry.is_dir() and PROJECT_NAME_PATTERN.match(entry.name)
        )

    def get(self, name: str) -> ProjectMetadata:
        path = self.sidecar_path(name)
        if not path.is_file():
            return ProjectMetadata()
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.warning("Ignoring unreadable metadata for project=%s: %s", name, exc)
            return ProjectMetadata()
        return ProjectMetadata.from_dict(payload)

    def put(self, name: str, metadata: ProjectMetadata) -> None:
        target = self.sidecar_path(name)
        if not target.parent.is_dir():
            raise FileNotFoundError(f"Project directory missing: {target.parent}")
        fd, tmp_name = tempfile.mkstemp(prefix=".meta-", suffix=".tmp", dir=target.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(metadata.to_dict(), fh, indent=2)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        log.debug("Wrote metadata for project=%s -> %s", name, target)

    def delete(self, name: str) -> None:
        self.sidecar_path(name).unlink(missing_ok=True)
