"""Synthesized Maven metadata, POM and checksum documents."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from xml.sax.saxutils import escape

LAST_UPDATED_FORMAT = "%Y%m%d%H%M%S"
CHECKSUM_ALGORITHMS = ("sha1", "md5")


def metadata_xml(group_id: str, artifact_id: str, version: str, now: datetime | None = None) -> str:
    """Metadata for an artifact that only ever has one version."""
    stamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).strftime(LAST_UPDATED_FORMAT)
    g, a, v = escape(group_id), escape(artifact_id), escape(version)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        "<metadata>\n"
        f"  <groupId>{g}</groupId>\n"
        f"  <artifactId>{a}</artifactId>\n"
        "  <versioning>\n"
        f"    <latest>{v}</latest>\n"
        f"    <release>{v}</release>\n"
        "    <versions>\n"
        f"      <version>{v}</version>\n"
        "    </versions>\n"
        f"    <lastUpdated>{stamp}</lastUpdated>\n"
        "  </versioning>\n"
        "</metadata>\n"
    )


def pom_xml(group_id: str, artifact_id: str, version: str) -> str:
    g, a, v = escape(group_id), escape(artifact_id), escape(version)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<project xmlns="http://maven.apache.org/POM/4.0.0"\n'
        '         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"\n'
        '         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 '
        'http://maven.apache.org/xsd/maven-4.0.0.xsd">\n'
        "  <modelVersion>4.0.0</modelVersion>\n"
        f"  <groupId>{g}</groupId>\n"
        f"  <artifactId>{a}</artifactId>\n"
        f"  <version>{v}</version>\n"
        "  <packaging>jar</packaging>\n"
        "</project>\n"
    )


def checksum(project_name: str, modified_millis: int, algorithm: str) -> str:
    """Digest of ``"{name}-{mtime millis}"``.

    This is a change marker for the project directory, not a hash of the
    served bytes.
    """
    if algorithm not in CHECKSUM_ALGORITHMS:
        raise ValueError(f"Unsupported checksum algorithm: {algorithm}")
    data = f"{project_name}-{modified_millis}".encode("utf-8")
    return hashlib.new(algorithm, data, usedforsecurity=False).hexdigest()
