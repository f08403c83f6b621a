"""Filesystem-backed store of hosted projects."""

from __future__ import annotations

import logging
import os
import shutil
import uuid
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from mavenhost.modules.artifactrepo.domain import Project, ProjectMetadata, SIDECAR_FILENAME, utc_now_iso
from mavenhost.modules.artifactrepo.domain.constants import PROJECT_NAME_INVALID_CHARS, PROJECT_NAME_PATTERN
from mavenhost.modules.artifactrepo.exceptions import IngestionError, ProjectNotFound
from mavenhost.modules.artifactrepo.locator import SourceLocator
from mavenhost.modules.artifactrepo.repositories import ProjectMetadataStore, SidecarMetadataStore
from mavenhost.modules.artifactrepo.store.ignore import IgnoreRules, copy_tree
from mavenhost.modules.artifactrepo.version import VersionContext, VersionResolver

STAGING_DIRNAME = ".staging"


def sanitize_name(name: str) -> str:
    cleaned = PROJECT_NAME_INVALID_CHARS.sub("-", name.strip())
    return cleaned or "project"


class ProjectStore:
    """Projects are directories under ``projects_dir``; metadata goes through a key-value store.

    Create and update build the new content in a staging directory first, so a
    copy that fails never touches an existing project. Concurrent writers on
    the same project name are not coordinated.
    """

    def __init__(
        self,
        projects_dir: Path,
        metadata_store: Optional[ProjectMetadataStore] = None,
        locator: Optional[SourceLocator] = None,
        version_resolver: Optional[VersionResolver] = None,
    ) -> None:
        self.projects_dir = Path(projects_dir)
        self.projects_dir.mkdir(parents=True, exist_ok=True)
        self.staging_dir = self.projects_dir / STAGING_DIRNAME
        self.metadata_store = metadata_store or SidecarMetadataStore(self.projects_dir)
        self.locator = locator or SourceLocator()
        self.version_resolver = version_resolver or VersionResolver()
        self.log = logging.getLogger(self.__class__.__name__)

    # ------------------------------------------------------------------ reads
    def list(self) -> List[Project]:
        projects: List[Project] = []
        for name in self.metadata_store.list():
            path = self.projects_dir / name
            if not path.is_dir():
                continue
            projects.append(Project(name=name, path=path, metadata=self.metadata_store.get(name)))
        return projects

    def get(self, name: str) -> Project:
        if not name or not PROJECT_NAME_PATTERN.match(name):
            raise ProjectNotFound(name)
        path = self.projects_dir / name
        if not path.is_dir():
            raise ProjectNotFound(name)
        return Project(name=name, path=path, metadata=self.metadata_store.get(name))

    def exists(self, name: str) -> bool:
        try:
            self.get(name)
        except ProjectNotFound:
            return False
        return True

    def source_root(self, project: Project) -> Path:
        """Stored source root when it still exists inside the project, else the project itself."""
        rel = project.metadata.source_root
        if rel:
            candidate = (project.path / rel).resolve()
            base = project.path.resolve()
            if candidate.is_dir() and candidate.is_relative_to(base):
                return candidate
            self.log.info("Stored source root %s missing for project=%s", rel, project.name)
        return project.path

    # ------------------------------------------------------------------ writes
    def create(self, name: str, source_dir: Path, metadata: ProjectMetadata) -> Project:
        source = self._check_source(source_dir)
        staged = self._stage(source)
        try:
            completed = self._complete_metadata(staged, metadata)
            if not completed.uploaded_at:
                completed.uploaded_at = utc_now_iso()
            final_name = self._unique_name(sanitize_name(name))
            target = self.projects_dir / final_name
            os.rename(staged, target)
        except BaseException:
            shutil.rmtree(staged, ignore_errors=True)
            raise
        try:
            self.metadata_store.put(final_name, completed)
        except BaseException:
            shutil.rmtree(target, ignore_errors=True)
            raise
        self.log.info(
            "Created project=%s from %s srcMainPath=%s version=%s",
            final_name,
            source,
            completed.source_root,
            completed.version,
        )
        return self.get(final_name)

    def update(self, name: str, source_dir: Path, metadata: ProjectMetadata) -> Project:
        project = self.get(name)
        source = self._check_source(source_dir)
        staged = self._stage(source)
        try:
            completed = self._complete_metadata(staged, metadata, fallback_upstream=project.metadata.upstream_url)
            self._clear(project.path)
            for entry in sorted(staged.iterdir(), key=lambda p: p.name):
                shutil.move(str(entry), str(project.path / entry.name))
        finally:
            shutil.rmtree(staged, ignore_errors=True)

        merged = project.metadata.merged_with(completed)
        merged.source_root = completed.source_root
        merged.last_updated = utc_now_iso()
        self.metadata_store.put(project.name, merged)
        os.utime(project.path)
        self.log.info(
            "Updated project=%s from %s srcMainPath=%s version=%s",
            project.name,
            source,
            merged.source_root,
            merged.version,
        )
        return self.get(project.name)

    def delete(self, name: str) -> None:
        project = self.get(name)
        shutil.rmtree(project.path)
        self.metadata_store.delete(project.name)
        self.log.info("Deleted project=%s", project.name)

    # ------------------------------------------------------------------ helpers
    def _check_source(self, source_dir: Path) -> Path:
        source = Path(source_dir)
        if not source.is_dir():
            raise IngestionError(f"Source directory not found: {source}")
        return source

    def _stage(self, source: Path) -> Path:
        self.staging_dir.mkdir(parents=True, exist_ok=True)
        staged = self.staging_dir / uuid.uuid4().hex
        try:
            count = copy_tree(source, staged, IgnoreRules.from_directory(source), skip_root_names=(SIDECAR_FILENAME,))
        except OSError as exc:
            shutil.rmtree(staged, ignore_errors=True)
            raise IngestionError(f"Failed to copy {source}: {exc}") from exc
        self.log.debug("Staged %d files from %s -> %s", count, source, staged)
        return staged

    def _complete_metadata(
        self,
        content_dir: Path,
        metadata: ProjectMetadata,
        fallback_upstream: Optional[str] = None,
    ) -> ProjectMetadata:
        completed = replace(metadata)
        completed.source_root = self.locator.locate(content_dir)
        completed.version = self.version_resolver.resolve(
            VersionContext(
                explicit_version=metadata.version,
                original_filename=metadata.original_filename,
                upstream_url=metadata.upstream_url or fallback_upstream,
                source_dir=content_dir,
            )
        )
        return completed

    def _unique_name(self, base: str) -> str:
        candidate = base
        counter = 1
        while (self.projects_dir / candidate).exists():
            candidate = f"{base}-{counter}"
            counter += 1
        return candidate

    def _clear(self, project_dir: Path) -> None:
        for entry in project_dir.iterdir():
            if entry.name == SIDECAR_FILENAME:
                continue
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
