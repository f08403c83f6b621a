"""HTTP client listing tags of an upstream GitHub repository."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

import httpx

from mavenhost.settings import Settings

_GITHUB_URL = re.compile(
    r"^(?:https?://(?:www\.)?github\.com/|git@github\.com:)"
    r"(?P<owner>[\w.-]+)/(?P<repo>[\w.-]+?)(?:\.git)?/?$"
)


def parse_repository(upstream_url: str) -> Tuple[str, str]:
    """Return ``(owner, repo)`` for a GitHub URL, raising ValueError otherwise."""
    match = _GITHUB_URL.match(upstream_url.strip())
    if not match:
        raise ValueError(f"Not a GitHub repository URL: {upstream_url}")
    return match.group("owner"), match.group("repo")


class UpstreamTagClient:
    """Fetch tag names from the GitHub REST API."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.base_url = settings.github_api_url.rstrip("/")
        self.log = logging.getLogger(self.__class__.__name__)
        headers = {"Accept": "application/vnd.github+json"}
        if settings.github_token:
            headers["Authorization"] = f"Bearer {settings.github_token}"
        self._headers = headers
        self._client = client or httpx.Client(timeout=settings.upstream_timeout)

    def list_tags(self, upstream_url: str) -> List[str]:
        owner, repo = parse_repository(upstream_url)
        url = f"{self.base_url}/repos/{owner}/{repo}/tags"
        self.log.info("Fetching tags owner=%s repo=%s", owner, repo)
        resp = self._client.get(url, params={"per_page": 100}, headers=self._headers)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            return []
        return [item["name"] for item in data if isinstance(item, dict) and item.get("name")]

    def close(self) -> None:
        self._client.close()
