from __future__ import annotations

from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    field_validator,
)


def _render_text(value: Any) -> str | None:
    """Render a scalar the way it is compared during scoring; anything else is null."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value
    return None


class CatalogRecord(BaseModel):
    """One dish category as stored in the catalog."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    category: str
    subcategory: str | list[str] | None = None
    vendor: str | None = None
    taste: str | None = None
    size: str | list[str] | None = None
    healthy: str | None = None
    price_tier: str | None = Field(
        default=None, validation_alias=AliasChoices("price_tier", "price")
    )
    dietary_restriction: str | list[str] | None = None
    average_rating: float = Field(
        default=0.0,
        ge=0.0,
        le=5.0,
        validation_alias=AliasChoices("average_rating", "average_underscore_rating"),
    )

    @field_validator("healthy", mode="before")
    @classmethod
    def _healthy_as_text(cls, value: Any) -> str | None:
        return _render_text(value)

    @property
    def variants(self) -> list[str]:
        if isinstance(self.subcategory, list):
            return list(self.subcategory)
        return [self.subcategory or ""]


class ScoredRecord(CatalogRecord):
    match_score: NonNegativeInt


class QueryAttributes(BaseModel):
    """Structured attributes extracted from a free-text query.

    Every attribute but ``dietary_restrictions`` is compared as text, so
    booleans and numbers from the interpreter are rendered to text and values
    of any other shape are dropped. ``dietary_restrictions`` keeps its two
    cases apart: a single restriction (text) excludes dishes, a list of
    restrictions scores dishes that share one of them.
    """

    model_config = ConfigDict(extra="ignore")

    category: str | None = None
    subcategory: str | None = None
    vendor: str | None = None
    taste: str | None = None
    size: str | None = None
    healthy: str | None = None
    price_tier: str | None = Field(
        default=None, validation_alias=AliasChoices("price_tier", "price")
    )
    average_rating: str | None = None
    dietary_restrictions: str | list[str] | None = None

    @field_validator(
        "category",
        "subcategory",
        "vendor",
        "taste",
        "size",
        "healthy",
        "price_tier",
        "average_rating",
        mode="before",
    )
    @classmethod
    def _scalar_as_text(cls, value: Any) -> str | None:
        return _render_text(value)

    @field_validator("dietary_restrictions", mode="before")
    @classmethod
    def _restrictions(cls, value: Any) -> str | list[str] | None:
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value if v is not None]
        return _render_text(value)

    def non_null(self) -> dict[str, str | list[str]]:
        return {name: value for name, value in self if value is not None}


class LineItem(BaseModel):
    category: str
    subcategory: str
    price: int
    vendor: str | None = None
    taste: str | None = None
    healthy: str | None = None
    dietary_restriction: str | list[str] | None = None
    average_rating: float = 0.0


# ── API payloads ─────────────────────────────────────────────────────────


class InterpretRequest(BaseModel):
    user_query_str: str = Field(..., max_length=1000)


class SearchRequest(BaseModel):
    query: str = Field(..., min_length=1, max_length=1000)


class SearchResponse(BaseModel):
    items: list[LineItem]
    total_candidates: int
    fallback: bool
    parsed_attributes: dict[str, Any] = Field(default_factory=dict)


class CheckoutRequest(BaseModel):
    selected: list[NonNegativeInt] = Field(..., min_length=1)


class CheckoutResponse(BaseModel):
    status: str
    items: list[LineItem]
    total: int
    message: str
