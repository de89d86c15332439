"""FastAPI dependencies."""

from fastapi import Request

from .news import NewsService


def get_news_service(request: Request) -> NewsService:
    """Return the process-wide news service stored on the app.

    :param request: Incoming request.
    :return: The app's news service, created on first use.
    """
    service = getattr(request.app.state, "news_service", None)
    if service is None:
        service = NewsService()
        request.app.state.news_service = service
    return service
