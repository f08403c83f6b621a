"""Errors raised by the artifact repository core."""

from __future__ import annotations


class ArtifactRepoError(Exception):
    """Base class for repository failures."""


class ProjectNotFound(ArtifactRepoError):
    """Unknown project, or a file that does not exist inside one."""


class BadPath(ProjectNotFound):
    """Request path does not have the groupId/artifactId/version/filename shape."""


class PackagingFailure(ArtifactRepoError):
    """Archive could not be produced from a project source tree."""


class AccessDenied(ArtifactRepoError):
    """Path resolves outside of the project it was requested from."""


class InvalidRequest(ArtifactRepoError):
    """Request is well-formed but cannot be satisfied (e.g. reading a directory)."""


class IngestionError(ArtifactRepoError):
    """Source content handed to the store is missing or unusable."""
