"""Infer a project version from its upload, upstream tags or build files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import httpx

from mavenhost.modules.artifactrepo.version.upstream import UpstreamTagClient

log = logging.getLogger(__name__)

ARCHIVE_EXTENSIONS = (".tar.gz", ".tgz", ".tar", ".zip", ".jar")

FILENAME_PATTERNS = (
    re.compile(r"-v?(\d+\.\d+\.\d+)$"),
    re.compile(r"-v?(\d+\.\d+)$"),
    re.compile(r"v(\d+\.\d+\.\d+)"),
    re.compile(r"v(\d+\.\d+)"),
    re.compile(r"(\d+\.\d+\.\d+)"),
)
TAG_PATTERN = re.compile(r"^v?\d+\.\d+(\.\d+)?$")
PROPERTIES_VERSION_LINE = re.compile(r"^version\s*=\s*(.+)$")
PROPERTIES_VERSION_VALUE = re.compile(r"^\d+\.\d+(\.\d+)?(-[\w.]+)?$")
BUILD_PROPERTIES_FILENAME = "gradle.properties"


@dataclass
class VersionContext:
    explicit_version: Optional[str] = None
    original_filename: Optional[str] = None
    upstream_url: Optional[str] = None
    source_dir: Optional[Path] = None


def strip_archive_extension(filename: str) -> str:
    lowered = filename.lower()
    for ext in ARCHIVE_EXTENSIONS:
        if lowered.endswith(ext):
            return filename[: -len(ext)]
    return filename


def version_from_filename(filename: str | None) -> Optional[str]:
    if not filename:
        return None
    stem = strip_archive_extension(Path(filename).name)
    for pattern in FILENAME_PATTERNS:
        match = pattern.search(stem)
        if match:
            return match.group(1)
    return None


def _numeric_key(version: str) -> Tuple[int, int, int]:
    parts = [int(p) for p in version.split(".")]
    parts += [0] * (3 - len(parts))
    return parts[0], parts[1], parts[2]


def latest_tag_version(tags: Iterable[str]) -> Optional[str]:
    """Highest ``vX.Y[.Z]`` tag with the leading ``v`` removed."""
    candidates = [tag[1:] if tag.startswith("v") else tag for tag in tags if TAG_PATTERN.match(tag)]
    if not candidates:
        return None
    return max(candidates, key=_numeric_key)


def version_from_build_properties(source_dir: Path | None) -> Optional[str]:
    if not source_dir or not Path(source_dir).is_dir():
        return None
    stack: List[Path] = [Path(source_dir)]
    while stack:
        current = stack.pop()
        candidate = current / BUILD_PROPERTIES_FILENAME
        if candidate.is_file():
            found = _read_properties_version(candidate)
            if found:
                return found
        try:
            children = sorted(
                (p for p in current.iterdir() if p.is_dir() and not p.is_symlink() and not p.name.startswith(".")),
                key=lambda p: p.name,
            )
        except OSError as exc:
            log.warning("Skipping unreadable directory %s: %s", current, exc)
            continue
        stack.extend(reversed(children))
    return None


def _read_properties_version(path: Path) -> Optional[str]:
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        log.warning("Cannot read %s: %s", path, exc)
        return None
    for raw_line in text.splitlines():
        match = PROPERTIES_VERSION_LINE.match(raw_line.strip())
        if not match:
            continue
        value = match.group(1).strip()
        if PROPERTIES_VERSION_VALUE.match(value):
            return value
        log.info("Ignoring invalid version %r in %s", value, path)
        return None
    return None


class VersionResolver:
    """Try each version source in priority order; the first hit wins."""

    def __init__(self, tag_client: UpstreamTagClient | None = None) -> None:
        self.tag_client = tag_client

    def resolve(self, context: VersionContext) -> Optional[str]:
        if context.explicit_version and context.explicit_version.strip():
            return context.explicit_version.strip()

        version = version_from_filename(context.original_filename)
        if version:
            log.debug("Version %s taken from filename %s", version, context.original_filename)
            return version

        if context.upstream_url:
            version = self._version_from_upstream(context.upstream_url)
            if version:
                return version

        version = version_from_build_properties(context.source_dir)
        if version:
            log.debug("Version %s taken from %s", version, BUILD_PROPERTIES_FILENAME)
        return version

    def _version_from_upstream(self, upstream_url: str) -> Optional[str]:
        if not self.tag_client:
            return None
        try:
            tags = self.tag_client.list_tags(upstream_url)
        except (httpx.HTTPError, ValueError) as exc:
            log.warning("Tag lookup failed for %s: %s", upstream_url, exc)
            return None
        version = latest_tag_version(tags)
        if version:
            log.debug("Version %s taken from upstream tags of %s", version, upstream_url)
        return version
