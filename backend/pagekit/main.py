from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pagekit.application.errors import ConfigurationError
from pagekit.config import settings
from pagekit.infrastructure.logging import configure_logging, get_logger
from pagekit.interfaces.api.v1.router import api_router

logger = get_logger(__name__)

OPENAPI_DESCRIPTION = """
Demo API for offset pagination over SQLAlchemy models.

List endpoints accept `page`, `limit`, `sortBy` and `orderBy` (`ASC` or `DESC`).
Malformed values fall back to endpoint defaults, out-of-range pages are clamped,
and every response carries `data`, `meta` and `links`.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Service health and connectivity checks."},
    {"name": "cats", "description": "Paginated cat listings backed by both fetch strategies."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    logger.info("app_startup", app_name=settings.app_name, version=settings.app_version)
    yield
    logger.info("app_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=OPENAPI_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)


@app.exception_handler(ConfigurationError)
async def handle_configuration_error(_: Request, exc: ConfigurationError):
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={"detail": str(exc)})


app.include_router(api_router)
