"""API routes for news by continent."""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from ...config import cache_control_header, cors_headers
from ...deps import get_news_service
from ...errors import NewsError, ServerException
from ...news import NewsService

router = APIRouter(prefix="/api")

logger = logging.getLogger(__name__)

# any other method is answered by the app's 405 handler
NEWS_PATH = "/api/news"


@router.options("/news")
def preflight() -> Response:
    """Answer CORS preflight with an empty body.

    :return: Empty 200 with CORS headers.
    """
    return Response(status_code=200, headers=cors_headers())


@router.get("/news", response_model=None)
async def get_news(
    continent: str | None = Query(default=None),  # noqa: B008
    refresh: bool = Query(default=False),  # noqa: B008
    service: NewsService = Depends(get_news_service),  # noqa: B008
) -> Response:
    """Get stories for a continent.

    :param continent: Continent name; defaults to Oceania.
    :param refresh: Bypass a fresh cache entry.
    :param service: News service dependency.
    :return: ``{stories, sources}`` with cache headers.
    """
    try:
        result = await service.get_news(continent, force_refresh=refresh)
    except NewsError:
        raise
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("[news] request for %r failed", continent)
        raise ServerException(str(exc)) from exc

    headers = cors_headers()
    headers["Cache-Control"] = cache_control_header()
    headers["X-Cache"] = "HIT" if result.cache_hit else "MISS"
    return JSONResponse(content=result.payload, headers=headers)
