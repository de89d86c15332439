"""Stateful view over the news API, one continent tab at a time."""

import logging
import typing as t
from dataclasses import dataclass, field
from datetime import datetime

from ..schemas import CONTINENTS, Story
from .api import NewsClient, NewsClientError
from .cards import render_card

logger = logging.getLogger(__name__)

INITIAL_CONTINENT = "Africa"


@dataclass
class CachedNews:
    """Stories fetched for one continent and when they arrived."""

    stories: list[Story] = field(default_factory=list)
    last_updated: datetime = field(default_factory=datetime.now)


def error_message(continent: str) -> str:
    """User-facing message for a failed load."""
    return f"Failed to load news for {continent}. Please try again."


class NewsView:
    """Client-side state: active tab, per-continent cache, loading, error.

    A failure for one continent never touches another continent's entry.

    :param client: News API client.
    :param clock: Returns the local time used for ``last_updated``.
    """

    def __init__(
        self,
        client: NewsClient | None = None,
        clock: t.Callable[[], datetime] = datetime.now,
    ) -> None:
        self.client = client if client is not None else NewsClient()
        self._clock = clock
        self.active_continent: str = INITIAL_CONTINENT
        self.news_by_continent: dict[str, CachedNews] = {}
        self.loading = False
        self.error: str | None = None

    @property
    def continents(self) -> tuple[str, ...]:
        """Tabs in display order."""
        return CONTINENTS

    async def select_continent(self, continent: str) -> None:
        """Switch tabs, loading the continent if nothing is cached.

        :param continent: Continent to activate.
        :raises ValueError: If the continent is not a known tab.
        """
        if continent not in CONTINENTS:
            raise ValueError(f"unknown continent '{continent}'")
        self.active_continent = continent
        if continent not in self.news_by_continent:
            await self.load_news(continent)

    async def load_news(self, continent: str, force_refresh: bool = False) -> None:
        """Fetch a continent's stories unless cached.

        :param continent: Continent to load.
        :param force_refresh: Fetch even when cached.
        """
        if not force_refresh and continent in self.news_by_continent:
            return

        self.loading = True
        self.error = None
        try:
            data = await self.client.fetch_news(continent, force_refresh)
            self.news_by_continent[continent] = CachedNews(
                stories=list(data.stories),
                last_updated=self._clock(),
            )
        except NewsClientError as exc:
            logger.warning("[view] load failed for %s: %s", continent, exc)
            self.error = error_message(continent)
        finally:
            self.loading = False

    async def refresh(self) -> None:
        """Force a reload of the active continent."""
        await self.load_news(self.active_continent, force_refresh=True)

    async def retry(self) -> None:
        """Retry action offered by the error panel."""
        await self.refresh()

    def render(self) -> str:
        """Render the active tab as text.

        :return: Loading panel, error panel, or the story list.
        """
        continent = self.active_continent
        cached = self.news_by_continent.get(continent)

        if self.loading and cached is None:
            return f"Searching global headlines for {continent}..."

        if self.error:
            return f"{self.error}\n[Retry]"

        header = f"TRENDING IN {continent.upper()}"
        if cached is not None:
            header += f"\nLast updated: {cached.last_updated:%H:%M}"
        if self.loading:
            header += "\nUpdating..."
        blocks = [header]

        if cached is not None:
            blocks.extend(render_card(story) for story in cached.stories)
            if not cached.stories and not self.loading:
                blocks.append("No stories found for this region.")

        return "\n\n".join(blocks)
