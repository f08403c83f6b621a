"""Repository exports."""

from .base import ProjectMetadataStore
from .memory import InMemoryMetadataStore
from .sidecar import SidecarMetadataStore

__all__ = ["ProjectMetadataStore", "InMemoryMetadataStore", "SidecarMetadataStore"]
