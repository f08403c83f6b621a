from .resolver import VersionContext, VersionResolver, latest_tag_version, version_from_filename
from .upstream import UpstreamTagClient, parse_repository

__all__ = [
    "UpstreamTagClient",
    "VersionContext",
    "VersionResolver",
    "latest_tag_version",
    "parse_repository",
    "version_from_filename",
]
