"""News service: prompt, provider call, parse, shape and cache."""

import logging
import typing as t
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from . import config
from .cache import TTLCache
from .errors import (
    ConfigurationError,
    InvalidContinent,
    ProviderError,
    StoryValidationError,
)
from .parser import parse_stories
from .provider import GeminiProvider, ProviderResult
from .schemas import (
    CONTINENTS,
    DEFAULT_CONTINENT,
    GroundingSource,
    RawStory,
    Scripture,
    Story,
)

logger = logging.getLogger(__name__)

STORY_COUNT = 10

PROMPT_TEMPLATE = """
Find the top {count} trending news stories from the continent of {continent} today.
For each story:
1) Summarize in 2-3 sentences.
2) Identify the underlying ideology or moral theme (e.g., greed, justice, compassion, stewardship, pride).
3) Provide a specific Bible scripture (reference and text) that speaks to it.
4) Briefly explain why it applies.

Return ONLY valid JSON array of objects with:
"title","summary","ideology","scripture_ref","scripture_text","application".
"""

_raw_stories = TypeAdapter(list[RawStory])


class _Provider(t.Protocol):  # pylint: disable=too-few-public-methods
    async def generate(self, prompt: str, api_key: str) -> ProviderResult:
        """Return the model's text and grounding sources."""


@dataclass(frozen=True)
class NewsResult:
    """Payload for one continent and whether it came from the cache."""

    continent: str
    payload: dict[str, t.Any]
    cache_hit: bool


def normalize_continent(continent: str | None) -> str:
    """Map a query value onto one of the fixed continent names.

    :param continent: Raw value; blank or None selects the default.
    :return: Canonical continent name.
    :raises InvalidContinent: If the name is not a known continent.
    """
    value = (continent or "").strip()
    if not value:
        return DEFAULT_CONTINENT
    for name in CONTINENTS:
        if name.lower() == value.lower():
            return name
    raise InvalidContinent(value)


def build_prompt(continent: str) -> str:
    """Render the fixed prompt for a continent."""
    return PROMPT_TEMPLATE.format(count=STORY_COUNT, continent=continent)


def validate_records(records: list[t.Any]) -> list[RawStory]:
    """Validate decoded records against the story schema.

    :param records: Records decoded by the parser.
    :return: Validated records.
    :raises StoryValidationError: Listing every bad ``index.field``.
    """
    try:
        return _raw_stories.validate_python(records)
    except ValidationError as exc:
        fields: list[str] = []
        for err in exc.errors():
            loc = ".".join(str(p) for p in err["loc"])
            if loc not in fields:
                fields.append(loc)
        raise StoryValidationError(fields) from exc


def _source_url(
    index: int,
    sources: list[GroundingSource] | None,
) -> str | None:
    # positional match, else the first source
    if not sources:
        return None
    if index < len(sources):
        return sources[index].uri
    return sources[0].uri


def shape_stories(
    continent: str,
    records: list[RawStory],
    sources: list[GroundingSource] | None = None,
) -> list[Story]:
    """Turn validated records into stories.

    :param continent: Canonical continent name.
    :param records: Validated provider records.
    :param sources: Grounding sources for source attribution, if any.
    :return: Stories with ids ``"{continent}-{index}"``.
    """
    return [
        Story(
            id=f"{continent}-{idx}",
            title=rec.title,
            summary=rec.summary,
            continent=continent,
            ideology=rec.ideology,
            scripture=Scripture(
                reference=rec.scripture_ref,
                text=rec.scripture_text,
                application=rec.application,
            ),
            sourceUrl=_source_url(idx, sources),
        )
        for idx, rec in enumerate(records)
    ]


class NewsService:
    """Fetches continent news through the provider with a TTL cache.

    :param provider: Provider client.
    :param cache: Cache owned by this service.
    :param api_key_getter: Returns the credential at request time.
    :param attach_sources: Return grounding sources and attribute a
        ``sourceUrl`` to each story.
    """

    def __init__(
        self,
        provider: _Provider | None = None,
        cache: TTLCache | None = None,
        api_key_getter: t.Callable[[], str | None] = config.get_api_key,
        attach_sources: bool = config.ATTACH_SOURCES,
    ) -> None:
        self.provider = provider if provider is not None else GeminiProvider()
        self.cache = (
            cache if cache is not None else TTLCache(config.CACHE_TTL_SECONDS)
        )
        self._api_key = api_key_getter
        self.attach_sources = attach_sources

    async def get_news(
        self,
        continent: str | None,
        force_refresh: bool = False,
    ) -> NewsResult:
        """Return stories for a continent, from cache when fresh.

        Failures are never cached.

        :param continent: Requested continent (case-insensitive).
        :param force_refresh: Skip a fresh cache entry.
        :return: News result.
        :raises InvalidContinent: For an unknown continent.
        :raises ConfigurationError: When the credential is missing.
        :raises ProviderError: When the provider call fails.
        :raises ParseError: When no JSON array can be decoded.
        :raises StoryValidationError: When records do not match the schema.
        """
        name = normalize_continent(continent)

        if not force_refresh:
            entry = self.cache.fresh(name)
            if entry is not None:
                logger.info("[news] cache hit for %s", name)
                return NewsResult(name, entry.payload, cache_hit=True)

        api_key = self._api_key()
        if not api_key:
            logger.error("[news] %s is not configured", config.API_KEY_ENV)
            raise ConfigurationError()

        logger.info("[news] fetching %s (force=%s)", name, force_refresh)
        try:
            result = await self.provider.generate(build_prompt(name), api_key)
        except ProviderError as exc:
            logger.warning("[news] provider failed for %s: %s", name, exc)
            raise

        parsed = parse_stories(result.text)
        if not parsed.ok:
            logger.warning("[news] unparseable output for %s: %s", name, parsed.error)

        try:
            records = validate_records(parsed.unwrap())
        except StoryValidationError as exc:
            logger.warning("[news] malformed stories for %s: %s", name, exc.fields)
            raise

        sources = result.sources if self.attach_sources else []
        stories = shape_stories(name, records, sources)
        payload = {
            "stories": [s.model_dump(exclude_none=True) for s in stories],
            "sources": [s.model_dump() for s in sources],
        }
        self.cache.put(name, payload)
        logger.info("[news] cached %d stories for %s", len(stories), name)
        return NewsResult(name, payload, cache_hit=False)
