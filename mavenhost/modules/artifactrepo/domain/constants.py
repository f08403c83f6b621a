"""Constants shared across the artifact repository."""

import re

SIDECAR_FILENAME = ".project-meta.json"
DEFAULT_VERSION = "1.0.0"
GITIGNORE_FILENAME = ".gitignore"
METADATA_FILENAME = "maven-metadata.xml"

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
PROJECT_NAME_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_-]")

ARCHIVE_SUFFIXES = (".jar", ".zip")
CHECKSUM_SUFFIXES = {".sha1": "sha1", ".md5": "md5"}
POM_SUFFIX = ".pom"

JAVA_ARCHIVE_MEDIA_TYPE = "application/java-archive"
XML_MEDIA_TYPE = "text/xml"
TEXT_MEDIA_TYPE = "text/plain"
