"""Print one continent's stories from a running news API.

Example::

    newsscript-headlines --continent Europe --refresh
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .. import config
from ..client import NewsClient, NewsView
from ..schemas import CONTINENTS


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show trending stories and scripture for a continent.",
    )
    parser.add_argument("--api", default=config.NEWS_API_URL, help="news endpoint URL")
    parser.add_argument(
        "--continent",
        default="Africa",
        choices=CONTINENTS,
        help="continent tab to show",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="ask the server to bypass its cache",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def run(
    api: str,
    continent: str,
    refresh: bool = False,
    client: NewsClient | None = None,
) -> tuple[int, str]:
    """Load a continent once and render it.

    :param api: News endpoint URL.
    :param continent: Continent to show.
    :param refresh: Force a server-side refresh.
    :param client: Optional preconfigured client.
    :return: Exit code and rendered text.
    """
    view = NewsView(client or NewsClient(api))
    if refresh:
        view.active_continent = continent
        await view.refresh()
    else:
        await view.select_continent(continent)
    return (1 if view.error else 0), view.render()


def main(argv: list[str] | None = None) -> int:
    """Console entry point."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    code, text = asyncio.run(run(args.api, args.continent, args.refresh))
    print(text)
    return code


if __name__ == "__main__":
    sys.exit(main())
