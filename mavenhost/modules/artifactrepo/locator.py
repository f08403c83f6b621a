"""Find the conventional Java source root inside an uploaded tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

log = logging.getLogger(__name__)


class SourceLocator:
    """Depth-first search for the first ``src/main`` directory.

    Archives arrive wrapped at arbitrary depth (repository root, module
    folder, ...), so the search has no depth limit. Directories are visited in
    pre-order with children in lexical order; the first match wins.
    """

    def __init__(self, marker: str = "src", child: str = "main") -> None:
        self.marker = marker
        self.child = child

    def locate(self, root_dir: Path) -> Optional[str]:
        root = Path(root_dir)
        if not root.is_dir():
            return None
        stack: List[Path] = list(reversed(self._subdirectories(root)))
        while stack:
            entry = stack.pop()
            if entry.name == self.marker:
                candidate = entry / self.child
                if candidate.is_dir():
                    found = candidate.relative_to(root).as_posix()
                    log.debug("Located source root %s under %s", found, root)
                    return found
            stack.extend(reversed(self._subdirectories(entry)))
        return None

    @staticmethod
    def _subdirectories(directory: Path) -> List[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            log.warning("Skipping unreadable directory %s: %s", directory, exc)
            return []
        return [entry for entry in entries if entry.is_dir() and not entry.is_symlink()]
