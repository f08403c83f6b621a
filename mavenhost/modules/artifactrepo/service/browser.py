"""Read-only views over a project's files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from mavenhost.modules.artifactrepo.domain import SIDECAR_FILENAME
from mavenhost.modules.artifactrepo.exceptions import AccessDenied, InvalidRequest, ProjectNotFound
from mavenhost.modules.artifactrepo.service.base import BaseService
from mavenhost.modules.artifactrepo.store import ProjectStore
from mavenhost.settings import Settings

_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")


def format_file_size(size: int) -> str:
    if size <= 0:
        return "0 Bytes"
    value = float(size)
    index = 0
    while value >= 1024 and index < len(_SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[index]}"


class ProjectBrowser(BaseService):
    def __init__(self, settings: Settings, store: ProjectStore) -> None:
        super().__init__(settings)
        self.store = store

    def describe(self, name: str) -> Dict[str, Any]:
        project = self.store.get(name)
        return {
            "name": project.name,
            "files": self.tree(project.path, max_depth=self.settings.tree_max_depth),
            "meta": project.metadata.to_dict(),
        }

    def tree(self, root: Path, max_depth: int = 5) -> List[Dict[str, Any]]:
        return self._walk(Path(root), Path(root), 0, max_depth)

    def _walk(self, directory: Path, base: Path, depth: int, max_depth: int) -> List[Dict[str, Any]]:
        if depth > max_depth:
            return []
        entries: List[Dict[str, Any]] = []
        try:
            items = list(directory.iterdir())
        except OSError as exc:
            self.log.warning("Cannot list %s: %s", directory, exc)
            return entries
        for item in items:
            if item.name == SIDECAR_FILENAME and directory == base:
                continue
            is_dir = item.is_dir()
            try:
                size = None if is_dir else item.stat().st_size
            except OSError as exc:
                # dangling symlinks and the like
                self.log.warning("Skipping %s: %s", item, exc)
                continue
            entry: Dict[str, Any] = {
                "name": item.name,
                "path": item.relative_to(base).as_posix(),
                "isDirectory": is_dir,
                "size": size,
            }
            if is_dir:
                entry["children"] = self._walk(item, base, depth + 1, max_depth)
            entries.append(entry)
        entries.sort(key=lambda e: (not e["isDirectory"], e["name"]))
        return entries

    def read_file(self, name: str, relative_path: str) -> Dict[str, Any]:
        if not relative_path:
            raise InvalidRequest("File path required")
        project = self.store.get(name)
        base = project.path.resolve()
        target = (project.path / relative_path).resolve()
        if not target.is_relative_to(base):
            raise AccessDenied(relative_path)
        if not target.exists():
            raise ProjectNotFound(f"{name}/{relative_path}")
        if target.is_dir():
            raise InvalidRequest("Cannot read directory")
        size = target.stat().st_size
        if size > self.settings.max_view_file_size:
            return {"content": None, "message": "File too large to display", "size": format_file_size(size)}
        content = target.read_text(encoding="utf-8", errors="replace")
        return {"content": content, "size": format_file_size(size)}
