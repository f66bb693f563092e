"""Pydantic schemas and helpers for validating engine IO payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from models.clothing_item import ClothingItem, from_raw_metadata
from models.taxonomy import normalize_subcategory

Category = Literal[
    "tops",
    "bottoms",
    "shorts",
    "skirts",
    "dresses",
    "jumpsuits",
    "blazers",
    "jackets",
    "shoes",
    "accessories",
    "purse",
    "jewelry",
    "swimwear",
]
FabricType = Literal[
    "cotton",
    "linen",
    "silk",
    "polyester",
    "wool",
    "denim",
    "leather",
    "nylon",
    "cashmere",
    "satin",
    "fleece",
    "other",
]
Occasion = Literal["casual", "work", "fancy", "party", "vacation"]
Season = Literal["spring", "summer", "fall", "winter"]

HEX_PATTERN = r"^#[0-9a-fA-F]{6}$"


class ClothingItemPayload(BaseModel):
    """Wire shape of a clothing item as sent by the mobile client."""

    model_config = ConfigDict(populate_by_name=True)

    item_id: str = Field(alias="id", min_length=1)
    category: Category
    color: str = Field(pattern=HEX_PATTERN)
    fabric_type: FabricType = Field("other", alias="fabricType")
    sub_category: Optional[str] = Field(None, alias="subCategory")
    secondary_color: Optional[str] = Field(None, alias="secondaryColor", pattern=HEX_PATTERN)
    occasions: List[Occasion] = Field(default_factory=list)
    name: Optional[str] = None

    @field_validator("sub_category")
    @classmethod
    def _normalise_sub_category(cls, value: Optional[str]) -> Optional[str]:
        return normalize_subcategory(value)

    def to_item(self) -> ClothingItem:
        return from_raw_metadata(self.model_dump())


class SuggestRequest(BaseModel):
    """Input contract for outfit suggestion."""

    model_config = ConfigDict(populate_by_name=True)

    items: List[ClothingItemPayload] = Field(default_factory=list)
    occasion: Optional[Occasion] = None
    season: Optional[Season] = None
    temperature: Optional[float] = Field(None, description="Ambient temperature in Celsius")
    max_results: Optional[int] = Field(None, alias="maxResults", ge=0)


class ValidateOutfitRequest(BaseModel):
    """Input contract for checking a manually assembled outfit."""

    items: List[ClothingItemPayload] = Field(default_factory=list)


class SuggestionPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[Dict[str, Any]]
    item_ids: List[str] = Field(serialization_alias="itemIds")
    score: float
    rating: int
    reasons: List[str]


class SuggestResponse(BaseModel):
    status: Literal["ok", "needs_review"] = "ok"
    suggestions: List[SuggestionPayload] = []
    count: int = 0
    season: Optional[Season] = None
    skipped_items: List[str] = Field(default_factory=list, serialization_alias="skippedItems")


class ValidationResult(BaseModel):
    """Wrapper returned to callers when payload validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    return ValidationResult(message=message, details=exc.errors(include_url=False)).model_dump()


__all__ = [
    "ClothingItemPayload",
    "SuggestRequest",
    "ValidateOutfitRequest",
    "SuggestionPayload",
    "SuggestResponse",
    "ValidationResult",
    "validation_failure",
]
