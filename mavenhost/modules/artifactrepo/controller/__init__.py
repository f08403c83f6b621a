from .files import router as files_router
from .repository import router as repository_router

__all__ = ["files_router", "repository_router"]
