"""FastAPI application main module."""

import logging
import typing as t
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException

from .api.routes import envcheck as r_envcheck
from .api.routes import news as r_news
from .config import cors_headers
from .errors import MethodNotAllowed, NewsError
from .news import NewsService
from .version import version_payload

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> t.AsyncGenerator[None, None]:
    """Application lifespan manager owning the news service and its cache.

    :param app: FastAPI app instance.
    :yield: None.
    """
    app.state.news_service = NewsService()
    logger.info(
        "news service ready (ttl=%ss)",
        app.state.news_service.cache.ttl,
    )
    yield
    app.state.news_service.cache.clear()


app = FastAPI(title="NewsScript API", lifespan=lifespan)

# prometheus metrics at /metrics (exclude noise)
Instrumentator(
    should_group_status_codes=False,
    excluded_handlers=["/metrics", "/healthz", "/readyz"],
).instrument(app).expose(app, include_in_schema=False)


@app.exception_handler(NewsError)
async def news_exc_handler(_: Request, exc: NewsError) -> JSONResponse:
    """Render news errors with their own status and CORS headers.

    :param _: The request object.
    :param exc: The news error.
    :return: Error body from the exception.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.payload(),
        headers=cors_headers(),
    )


# standardized error envelope
@app.exception_handler(HTTPException)
async def http_exc_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with standardized error envelope.

    The news endpoint answers every method but GET and OPTIONS with its
    own 405 body.

    :param request: The request object.
    :param exc: The HTTP exception.
    :return: Standardized error envelope.
    """
    if exc.status_code == 405 and request.url.path == r_news.NEWS_PATH:
        return await news_exc_handler(request, MethodNotAllowed())
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": str(exc.detail)},
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_exc_handler(_: Request, _exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions with standardized error envelope.

    :return: Standardized error envelope.
    """
    return JSONResponse(
        status_code=500,
        content={"ok": False, "error": "internal_error"},
    )


# routes
app.include_router(r_news.router)
app.include_router(r_envcheck.router)


@app.get("/healthz")
def health() -> dict:
    """Health check endpoint.

    :return: Health status.
    """
    return {"ready": True}


@app.get("/readyz")
def readyz() -> dict:
    """Readiness check endpoint.

    :return: Readiness status.
    """
    return {"ready": True}


@app.get("/version")
def version() -> dict:
    """Version information endpoint.

    :return: Version information.
    """
    return {"version": version_payload()}

