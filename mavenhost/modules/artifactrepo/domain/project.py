"""Project records and their sidecar metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

# dataclass attribute -> sidecar JSON key
_JSON_KEYS = {
    "original_filename": "originalFilename",
    "uploaded_at": "uploadedAt",
    "uploaded_by": "uploadedBy",
    "source_root": "srcMainPath",
    "version": "version",
    "upstream_url": "upstreamUrl",
    "upstream_branch": "upstreamBranch",
    "last_updated": "lastUpdated",
    "size": "size",
}


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@dataclass
class ProjectMetadata:
    """Sidecar document stored next to a project's sources.

    Every field is optional; an absent or unreadable sidecar is represented by
    ``ProjectMetadata()`` so that the project still shows up in listings.
    """

    original_filename: Optional[str] = None
    uploaded_at: Optional[str] = None
    uploaded_by: Optional[str] = None
    source_root: Optional[str] = None
    version: Optional[str] = None
    upstream_url: Optional[str] = None
    upstream_branch: Optional[str] = None
    last_updated: Optional[str] = None
    size: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any] | None) -> "ProjectMetadata":
        if not isinstance(payload, dict):
            return cls()
        values: Dict[str, Any] = {}
        for attr, key in _JSON_KEYS.items():
            value = payload.get(key, payload.get(attr))
            if value is None:
                continue
            if attr == "size":
                try:
                    value = int(value)
                except (TypeError, ValueError):
                    continue
            else:
                value = str(value)
            values[attr] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for attr, key in _JSON_KEYS.items()}

    def merged_with(self, newer: "ProjectMetadata") -> "ProjectMetadata":
        """Overlay the non-empty fields of ``newer`` on top of this record."""
        updates = {
            f.name: getattr(newer, f.name)
            for f in fields(newer)
            if getattr(newer, f.name) is not None
        }
        return replace(self, **updates)


@dataclass
class Project:
    name: str
    path: Path
    metadata: ProjectMetadata = field(default_factory=ProjectMetadata)

    @property
    def modified_at(self) -> datetime:
        return datetime.fromtimestamp(self.path.stat().st_mtime, tz=timezone.utc)

    @property
    def modified_millis(self) -> int:
        return self.path.stat().st_mtime_ns // 1_000_000
