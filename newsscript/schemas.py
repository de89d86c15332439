"""Pydantic schemas for stories and API responses."""

import typing as t

from pydantic import BaseModel, ConfigDict, Field

Continent = t.Literal[
    "Africa",
    "Asia",
    "Europe",
    "North America",
    "South America",
    "Oceania",
]

CONTINENTS: tuple[str, ...] = t.get_args(Continent)
DEFAULT_CONTINENT: Continent = "Oceania"

NonEmptyStr = t.Annotated[str, Field(min_length=1)]


class Scripture(BaseModel):
    """Schema for a scripture citation attached to a story."""

    reference: str
    text: str
    application: str


class Story(BaseModel):
    """Schema for a single shaped news story."""

    id: NonEmptyStr
    title: str
    summary: str
    continent: Continent
    ideology: str
    scripture: Scripture
    sourceUrl: str | None = None


class GroundingSource(BaseModel):
    """Schema for a search grounding source."""

    title: str = "Source"
    uri: str


class NewsResp(BaseModel):
    """Response schema for news by continent."""

    stories: list[Story]
    sources: list[GroundingSource] = Field(default_factory=list)


class RawStory(BaseModel):
    """Schema for one record decoded from the provider's text."""

    model_config = ConfigDict(extra="ignore")

    title: NonEmptyStr
    summary: NonEmptyStr
    ideology: NonEmptyStr
    scripture_ref: NonEmptyStr
    scripture_text: NonEmptyStr
    application: NonEmptyStr


class EnvCheckResp(BaseModel):
    """Response schema for the credential diagnostic."""

    hasGEMINI_API_KEY: bool
    keyLength: t.Annotated[int, Field(ge=0)]
    note: str
