"""Client-side view of the news API."""

from .api import NewsClient, NewsClientError
from .view import CachedNews, NewsView

__all__ = ["CachedNews", "NewsClient", "NewsClientError", "NewsView"]
