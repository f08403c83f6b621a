"""Service wiring and startup hooks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from mavenhost.modules.artifactrepo import ArtifactCatalog, ProjectBrowser, ProjectStore, RepositoryDispatcher
from mavenhost.modules.artifactrepo.packager import ArtifactPackager
from mavenhost.modules.artifactrepo.version import UpstreamTagClient, VersionResolver
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    http_client: Optional[httpx.Client] = None
    tag_client: UpstreamTagClient = field(init=False)
    version_resolver: VersionResolver = field(init=False)
    project_store: ProjectStore = field(init=False)
    dispatcher: RepositoryDispatcher = field(init=False)
    catalog: ArtifactCatalog = field(init=False)
    browser: ProjectBrowser = field(init=False)

    def __post_init__(self) -> None:
        self.tag_client = UpstreamTagClient(self.settings, client=self.http_client)
        self.version_resolver = VersionResolver(tag_client=self.tag_client)
        self.project_store = ProjectStore(
            self.settings.projects_path,
            version_resolver=self.version_resolver,
        )
        self.dispatcher = RepositoryDispatcher(
            self.project_store,
            packager=ArtifactPackager(),
            default_group_id=self.settings.default_group_id,
        )
        self.catalog = ArtifactCatalog(self.settings, self.project_store)
        self.browser = ProjectBrowser(self.settings, self.project_store)


async def bootstrap_services(container: ServiceContainer) -> None:
    settings = container.settings
    log.info("...................RUN...................")
    log.info(
        "projects=%s repository=%s groupId=%s auth=%s admin=%s",
        settings.projects_path,
        settings.repository_base_path,
        settings.default_group_id,
        "ON" if (settings.api_tokens or settings.admin_tokens) else "OFF",
        "ON" if settings.admin_tokens else "OFF",
    )
    log.info("Hosting %d projects", len(container.project_store.list()))


async def shutdown_services(container: ServiceContainer) -> None:
    container.tag_client.close()
