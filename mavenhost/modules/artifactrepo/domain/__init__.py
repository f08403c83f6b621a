from .constants import DEFAULT_VERSION, SIDECAR_FILENAME
from .coordinate import ArtifactCoordinate
from .project import Project, ProjectMetadata, utc_now_iso

__all__ = [
    "ArtifactCoordinate",
    "DEFAULT_VERSION",
    "Project",
    "ProjectMetadata",
    "SIDECAR_FILENAME",
    "utc_now_iso",
]
