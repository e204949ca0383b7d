from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gallery import __version__
from gallery.core.config import get_settings
from gallery.core.logging import configure_logging
from gallery.infrastructure.database import dispose_engine, init_db
from gallery.interfaces.http import create_api_router
from gallery.interfaces.web import pages


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.database.create_tables_on_startup:
        await init_db()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Public gallery of workflow templates",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(pages.router, tags=["pages"])

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "gallery.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


app = create_app()
