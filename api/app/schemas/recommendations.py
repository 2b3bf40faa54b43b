# api/app/schemas/recommendations.py
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Activity(CamelModel):
    id: str
    title: str
    description: str
    category: str
    price: float | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    location: str | None = None


class Hotel(CamelModel):
    id: str
    name: str
    description: str
    price_per_night: float
    rating: float | None = Field(default=None, ge=0, le=5)
    location: str
    amenities: list[str] = Field(default_factory=list)


class Restaurant(CamelModel):
    id: str
    name: str
    description: str
    cuisine: str
    price_range: Literal["$", "$$", "$$$"]
    rating: float | None = Field(default=None, ge=0, le=5)
    location: str | None = None


class TravelRecommendations(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    summary: str = ""
    activities: list[Activity] = Field(default_factory=list)
    hotels: list[Hotel] = Field(default_factory=list)
    restaurants: list[Restaurant] = Field(default_factory=list)


class RecommendationsRequest(CamelModel):
    # Validated in the route so a missing or non-string summary is a 400
    conversation_summary: Any = None
    conversation_id: Any = None


class RecommendationsResponse(BaseModel):
    success: bool = True
    # LLM output is passed through as parsed, so this stays a plain dict
    data: dict[str, Any]
    error: str | None = None
