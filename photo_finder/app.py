"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings, settings as default_settings
from .api.router import api_router
from .delivery.relay import RelayDispatcher
from .errors import PhotoFinderError
from .reports.generator import ReportGenerator
from .services.photo_search import PhotoSearchService

# Configure logging for our modules
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
logging.getLogger("photo_finder").setLevel(logging.DEBUG)

logger = logging.getLogger(__name__)


async def handle_service_error(request: Request, exc: PhotoFinderError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})",
            exc_info=exc,
        )
    body = {"error": exc.message}
    if exc.expose_details and exc.details:
        body["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=body)


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request.", "details": details})


def build_service(settings: Settings) -> PhotoSearchService:
    return PhotoSearchService(
        folder=settings.photos_folder,
        generator=ReportGenerator(settings.report_dir, settings.report_title),
        dispatcher=RelayDispatcher(settings.relay_url, timeout=settings.relay_timeout_seconds),
        subject_tag=settings.subject_type,
    )


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[PhotoSearchService] = None,
) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(
        title="photo-finder",
        version="0.1.0",
        description="Photo folder search with emailed PDF reports",
    )
    app.state.search_service = service or build_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PhotoFinderError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.include_router(api_router, prefix="/api")

    if settings.photos_folder.exists():
        app.mount(
            "/",
            StaticFiles(directory=str(settings.photos_folder)),
            name="photos",
        )
    else:
        logger.warning(f"Photos folder {settings.photos_folder} not found; static serving disabled")

    return app
