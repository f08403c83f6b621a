"""Artifact repository module exports."""

from .controller import files_router, repository_router
from .service import ArtifactCatalog, ProjectBrowser, RepositoryDispatcher
from .store import ProjectStore

__all__ = [
    "ArtifactCatalog",
    "ProjectBrowser",
    "ProjectStore",
    "RepositoryDispatcher",
    "files_router",
    "repository_router",
]
