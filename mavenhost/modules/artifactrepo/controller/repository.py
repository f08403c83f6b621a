"""Public Maven repository endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response

from mavenhost.modules.artifactrepo.controller.deps import get_catalog, get_dispatcher
from mavenhost.modules.artifactrepo.exceptions import PackagingFailure, ProjectNotFound
from mavenhost.modules.artifactrepo.service import ArtifactCatalog, RepositoryDispatcher

log = logging.getLogger(__name__)

router = APIRouter(tags=["repository"])


@router.get("/api/artifacts")
def list_artifacts(request: Request, catalog: ArtifactCatalog = Depends(get_catalog)) -> Dict[str, Any]:
    base_path = catalog.settings.repository_base_path.rstrip("/")
    return {
        "artifacts": catalog.list_artifacts(),
        "repositoryUrl": f"{str(request.base_url).rstrip('/')}{base_path}",
    }


@router.get("/{path:path}")
def serve_artifact(path: str, dispatcher: RepositoryDispatcher = Depends(get_dispatcher)):
    try:
        result = dispatcher.dispatch(path)
    except ProjectNotFound:
        return PlainTextResponse("Not found", status_code=404)
    except PackagingFailure:
        log.exception("Archive build failed for %s", path)
        return PlainTextResponse("Failed to create archive", status_code=500)
    if result.file_path is not None:
        return FileResponse(result.file_path, headers=result.headers)
    return Response(content=result.body, media_type=result.media_type, headers=result.headers)
