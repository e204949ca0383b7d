"""HTTP interface: API router assembly."""

from fastapi import APIRouter

from gallery.interfaces.http.routers import health, templates


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(templates.router, prefix="/templates", tags=["templates"])
    router.include_router(health.router, tags=["health"])
    return router


__all__ = [
    "create_api_router",
]
