"""Request-scoped dependencies shared by the repository routers."""

from __future__ import annotations

from fastapi import Header, HTTPException, Request

from mavenhost.modules.artifactrepo.service import ArtifactCatalog, ProjectBrowser, RepositoryDispatcher
from mavenhost.modules.artifactrepo.store import ProjectStore


def get_container(request: Request):
    container = getattr(request.app.state, "container", None)
    if not container:
        raise HTTPException(status_code=500, detail="Service container not initialized.")
    return container


def get_dispatcher(request: Request) -> RepositoryDispatcher:
    return get_container(request).dispatcher


def get_catalog(request: Request) -> ArtifactCatalog:
    return get_container(request).catalog


def get_browser(request: Request) -> ProjectBrowser:
    return get_container(request).browser


def get_store(request: Request) -> ProjectStore:
    return get_container(request).project_store


def require_authenticated(request: Request, x_api_token: str | None = Header(None)) -> None:
    settings = get_container(request).settings
    allowed = list(settings.api_tokens) + list(settings.admin_tokens)
    if not allowed:
        return
    if x_api_token not in allowed:
        raise HTTPException(status_code=401, detail="Authentication required")


def require_admin(request: Request, x_api_token: str | None = Header(None)) -> None:
    settings = get_container(request).settings
    if not settings.admin_tokens:
        return
    if x_api_token not in settings.admin_tokens:
        raise HTTPException(status_code=403, detail="Admin access required")
