"""HTTP client for the news endpoint."""

import logging
import typing as t

import httpx

from .. import config
from ..schemas import NewsResp

logger = logging.getLogger(__name__)


class NewsClientError(Exception):
    """A news request failed.

    :param message: Human-readable reason.
    :param status_code: HTTP status, when a response was received.
    :param body: Decoded error body, when available.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: t.Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class NewsClient:  # pylint: disable=too-few-public-methods
    """Fetches ``{stories, sources}`` from the news endpoint.

    In-flight requests are not cancelled.

    :param url: Full URL of the news endpoint.
    :param transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        url: str = config.NEWS_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._transport = transport

    async def fetch_news(
        self,
        continent: str,
        force_refresh: bool = False,
    ) -> NewsResp:
        """Get the news for one continent.

        :param continent: Continent name.
        :param force_refresh: Ask the server to bypass its cache.
        :return: Parsed response.
        :raises NewsClientError: On transport failure, non-2xx status or a
            body that does not match the response schema.
        """
        params: dict[str, str] = {"continent": continent}
        if force_refresh:
            params["refresh"] = "true"
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.get(self.url, params=params)
                response.raise_for_status()
                return NewsResp.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            try:
                body = exc.response.json()
            except ValueError:
                body = exc.response.text
            logger.warning(
                "[client] %s returned %d for %s",
                self.url,
                exc.response.status_code,
                continent,
            )
            raise NewsClientError(
                f"news request failed with {exc.response.status_code}",
                status_code=exc.response.status_code,
                body=body,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("[client] request to %s failed: %s", self.url, exc)
            raise NewsClientError(str(exc)) from exc
        except ValueError as exc:
            logger.warning("[client] invalid body from %s: %s", self.url, exc)
            raise NewsClientError("invalid news response") from exc
