"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from .api import health_router
from .bootstrap import ServiceContainer, bootstrap_services, shutdown_services
from .logging_config import configure_logging
from .settings import Settings, get_settings
from mavenhost.modules.artifactrepo import files_router, repository_router


def create_app(settings: Settings | None = None, services: ServiceContainer | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    services = services or ServiceContainer(settings)

    app = FastAPI(title=settings.app_name, version=settings.version)
    app.include_router(health_router)
    app.include_router(files_router)
    # catch-all artifact route, so it goes last
    app.include_router(repository_router, prefix=settings.repository_base_path.rstrip("/"))
    app.state.container = services

    @app.on_event("startup")
    async def _startup() -> None:  # pragma: no cover - invoked by FastAPI
        await bootstrap_services(services)

    @app.on_event("shutdown")
    async def _shutdown() -> None:  # pragma: no cover - invoked by FastAPI
        await shutdown_services(services)

    return app
