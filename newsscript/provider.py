"""Gemini generateContent client with search grounding."""

import logging
import typing as t
from dataclasses import dataclass, field

import httpx

from . import config
from .errors import ProviderError, ServerException
from .schemas import GroundingSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderResult:
    """Text and grounding sources from one provider call."""

    text: str
    sources: list[GroundingSource] = field(default_factory=list)


def _first_candidate(data: t.Any) -> dict[str, t.Any]:
    if not isinstance(data, dict):
        return {}
    candidates = data.get("candidates") or []
    if not candidates or not isinstance(candidates[0], dict):
        return {}
    return candidates[0]


def extract_text(data: t.Any) -> str:
    """Concatenate the text parts of the first candidate.

    :param data: Decoded generateContent response.
    :return: Model text, or ``"[]"`` when there is none.
    """
    parts = (_first_candidate(data).get("content") or {}).get("parts") or []
    texts = [
        p["text"] for p in parts if isinstance(p, dict) and p.get("text")
    ]
    return "".join(texts) or "[]"


def extract_sources(data: t.Any) -> list[GroundingSource]:
    """Collect web grounding chunks of the first candidate.

    :param data: Decoded generateContent response.
    :return: Grounding sources in provider order.
    """
    meta = _first_candidate(data).get("groundingMetadata") or {}
    out: list[GroundingSource] = []
    for chunk in meta.get("groundingChunks") or []:
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if not web or not web.get("uri"):
            continue
        out.append(
            GroundingSource(title=web.get("title") or "Source", uri=web["uri"]),
        )
    return out


class GeminiProvider:  # pylint: disable=too-few-public-methods
    """Async client for the Gemini generateContent endpoint.

    :param model: Model name.
    :param base_url: API base URL (up to and including the version).
    :param temperature: Sampling temperature.
    :param timeout: Request timeout in seconds; None leaves it to the host.
    :param transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        model: str = config.GEMINI_MODEL,
        base_url: str = config.GEMINI_BASE_URL,
        temperature: float = config.GEMINI_TEMPERATURE,
        timeout: float | None = config.PROVIDER_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.temperature = temperature
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _body(self, prompt: str) -> dict[str, t.Any]:
        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {"temperature": self.temperature},
            "tools": [{"googleSearch": {}}],
        }

    async def generate(self, prompt: str, api_key: str) -> ProviderResult:
        """Send one prompt and return the model's text and sources.

        Not retried; a failure propagates to the caller.

        :param prompt: Prompt text.
        :param api_key: Provider credential.
        :return: Provider result.
        :raises ProviderError: On a non-success status.
        :raises ServerException: When a success body is not a JSON object.
        """
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self.endpoint,
                headers={"x-goog-api-key": api_key},
                json=self._body(prompt),
            )

        if not response.is_success:
            try:
                details = response.json()
            except ValueError:
                details = response.text
            logger.warning(
                "[gemini] %s returned %d",
                self.model,
                response.status_code,
            )
            raise ProviderError(response.status_code, details)

        try:
            data = response.json()
        except ValueError as exc:
            logger.warning("[gemini] %s returned a non-JSON body", self.model)
            raise ServerException(f"Gemini returned a non-JSON body: {exc}") from exc
        if not isinstance(data, dict):
            raise ServerException("Gemini returned an unexpected body")

        return ProviderResult(text=extract_text(data), sources=extract_sources(data))
