"""Authenticated project management endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from mavenhost.modules.artifactrepo.controller.deps import (
    get_browser,
    get_catalog,
    get_store,
    require_admin,
    require_authenticated,
)
from mavenhost.modules.artifactrepo.exceptions import AccessDenied, InvalidRequest, ProjectNotFound
from mavenhost.modules.artifactrepo.service import ArtifactCatalog, ProjectBrowser
from mavenhost.modules.artifactrepo.store import ProjectStore

router = APIRouter(prefix="/files/api", tags=["projects"], dependencies=[Depends(require_authenticated)])


@router.get("/projects")
def list_projects(catalog: ArtifactCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    return {"projects": catalog.list_projects()}


@router.get("/projects/{name}")
def get_project(name: str, browser: ProjectBrowser = Depends(get_browser)) -> Dict[str, Any]:
    try:
        return browser.describe(name)
    except ProjectNotFound as exc:
        raise HTTPException(status_code=404, detail="Project not found") from exc


@router.get("/projects/{name}/file")
def read_project_file(
    name: str,
    path: str | None = None,
    browser: ProjectBrowser = Depends(get_browser),
) -> Dict[str, Any]:
    try:
        return browser.read_file(name, path or "")
    except AccessDenied as exc:
        raise HTTPException(status_code=403, detail="Access denied") from exc
    except InvalidRequest as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ProjectNotFound as exc:
        raise HTTPException(status_code=404, detail="File not found") from exc


@router.delete("/projects/{name}", dependencies=[Depends(require_admin)])
def delete_project(name: str, store: ProjectStore = Depends(get_store)) -> Dict[str, Any]:
    try:
        store.delete(name)
    except ProjectNotFound as exc:
        raise HTTPException(status_code=404, detail="Project not found") from exc
    return {"success": True, "message": "Project deleted"}
