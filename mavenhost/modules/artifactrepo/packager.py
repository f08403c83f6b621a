"""Build in-memory JAR/ZIP archives from project source trees."""

from __future__ import annotations

import io
import logging
import os
import zipfile
from pathlib import Path
from typing import FrozenSet, Iterable

from mavenhost.modules.artifactrepo.domain import SIDECAR_FILENAME
from mavenhost.modules.artifactrepo.exceptions import PackagingFailure


class ArtifactPackager:
    """Zip every file under a source root, skipping repository bookkeeping files."""

    def __init__(self, excluded_names: Iterable[str] = (SIDECAR_FILENAME,)) -> None:
        self.excluded_names: FrozenSet[str] = frozenset(excluded_names)
        self.log = logging.getLogger(self.__class__.__name__)

    def pack(self, source_root: Path) -> bytes:
        root = Path(source_root)
        if not root.is_dir():
            raise PackagingFailure(f"Source root does not exist: {root}")
        buffer = io.BytesIO()
        count = 0
        try:
            with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False) as zf:
                for current, dirs, files in os.walk(root):
                    dirs.sort()
                    rel_dir = Path(current).relative_to(root)
                    for name in sorted(files):
                        if name in self.excluded_names:
                            continue
                        arcname = (rel_dir / name).as_posix()
                        zf.write(Path(current) / name, arcname)
                        count += 1
        except (OSError, ValueError, zipfile.BadZipFile) as exc:
            raise PackagingFailure(f"Failed to package {root}: {exc}") from exc
        data = buffer.getvalue()
        self.log.info("Packaged %d files from %s (%d bytes)", count, root, len(data))
        return data
