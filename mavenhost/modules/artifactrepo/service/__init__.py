"""Service exports."""

from .browser import ProjectBrowser, format_file_size
from .catalog import ArtifactCatalog
from .dispatcher import ArtifactResponse, RepositoryDispatcher

__all__ = ["ArtifactCatalog", "ArtifactResponse", "ProjectBrowser", "RepositoryDispatcher", "format_file_size"]
