import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from servicedir.api import ai, catalog, directory, inquiries
from servicedir.api.admin import audit, bulk_import, categories, dashboard, services
from servicedir.api.admin import inquiries as admin_inquiries
from servicedir.core.category_tags import get_category_tags
from servicedir.core.config import get_settings
from servicedir.core.errors import InvalidScope, UpstreamFailure, ValidationFailure
from servicedir.core.logging_config import setup_logging
from servicedir.db import mongo
from servicedir.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # loads the tag vocabulary once; a bad CATEGORY_TAGS_FILE stops startup
    get_category_tags()
    await CategoryRepository(mongo.db[mongo.CATEGORIES]).create_indexes()
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # public routers
    app.include_router(catalog.router)
    app.include_router(directory.router)
    app.include_router(inquiries.router)
    app.include_router(ai.router)

    # admin routers
    app.include_router(dashboard.router)
    app.include_router(services.router)
    app.include_router(categories.router)
    app.include_router(admin_inquiries.router)
    app.include_router(bulk_import.router)
    app.include_router(audit.router)

    @app.exception_handler(ValidationFailure)
    async def validation_failure_handler(request: Request, exc: ValidationFailure):
        return JSONResponse(status_code=422, content={"detail": exc.as_dict()})

    @app.exception_handler(UpstreamFailure)
    async def upstream_failure_handler(request: Request, exc: UpstreamFailure):
        logger.error("Upstream failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=503,
            content={"detail": f"{exc.upstream} is unavailable, please try again later"},
        )

    @app.exception_handler(InvalidScope)
    async def invalid_scope_handler(request: Request, exc: InvalidScope):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.get("/")
    def root():
        return {"ok": True, "docs": "/docs"}

    return app


app = create_app()
