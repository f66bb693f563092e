"""Categorical styling rules shared by combo generation and manual outfit checks."""

from __future__ import annotations

from typing import List, Sequence

from models.clothing_item import ClothingItem
from models.taxonomy import LOWER_BODY_CATEGORIES

SHIRT_LIKE_SUBCATEGORIES = frozenset(
    {
        "tank_top",
        "tshirt",
        "long_sleeve",
        "blouse",
        "sweater",
        "sweatshirt",
        "hoodie",
        "polo",
        "workout_shirt",
    }
)

DRESS_WITH_BOTTOMS_WARNING = "A dress typically doesn't pair with pants or bottoms"
BLAZER_NEEDS_SHIRT_WARNING = "A blazer usually needs a shirt or top underneath"
EMPTY_OUTFIT_WARNING = "Select at least one item to create an outfit"
ONE_PIECE_WARNING = "A one-piece swimsuit doesn't pair with separate swim tops or bottoms"
SWIM_WITH_TOPS_WARNING = "Swimwear doesn't typically pair with regular tops"
SWIM_WITH_BOTTOMS_WARNING = "Swimwear doesn't typically pair with regular bottoms"


def is_dress(item: ClothingItem) -> bool:
    return item.category == "dresses"


def is_blazer(item: ClothingItem) -> bool:
    return item.category == "blazers"


def is_lower_body(item: ClothingItem) -> bool:
    return item.category in LOWER_BODY_CATEGORIES


def is_shirt_like(item: ClothingItem) -> bool:
    """Tops that can be worn under a blazer; an untagged top counts."""

    if item.category != "tops":
        return False
    return not item.sub_category or item.sub_category in SHIRT_LIKE_SUBCATEGORIES


def _is_swim(item: ClothingItem, sub_category: str) -> bool:
    return item.category == "swimwear" and item.sub_category == sub_category


def collect_warnings(items: Sequence[ClothingItem]) -> List[str]:
    """Evaluate every styling rule and return one message per violation."""

    warnings: List[str] = []
    has_dress = any(is_dress(item) for item in items)
    has_lower = any(is_lower_body(item) for item in items)

    if has_dress and has_lower:
        warnings.append(DRESS_WITH_BOTTOMS_WARNING)
    if any(is_blazer(item) for item in items) and not has_dress and not any(is_shirt_like(item) for item in items):
        warnings.append(BLAZER_NEEDS_SHIRT_WARNING)

    has_one_piece = any(_is_swim(item, "one_piece") for item in items)
    has_swim_separates = any(_is_swim(item, "swim_top") or _is_swim(item, "swim_bottom") for item in items)
    if has_one_piece and has_swim_separates:
        warnings.append(ONE_PIECE_WARNING)

    if any(item.category == "swimwear" for item in items):
        if any(item.category == "tops" for item in items):
            warnings.append(SWIM_WITH_TOPS_WARNING)
        if has_lower:
            warnings.append(SWIM_WITH_BOTTOMS_WARNING)
    return warnings


def is_valid_combo(combo: Sequence[ClothingItem]) -> bool:
    """Return True when the combo breaks none of the styling rules."""

    return not collect_warnings(combo)


def validate_outfit(items: Sequence[ClothingItem]) -> List[str]:
    """Return human-readable warnings for a manually assembled outfit.

    The input is never modified or rejected; an empty list means the outfit
    passes every rule.
    """

    warnings = collect_warnings(items)
    if not items:
        warnings.append(EMPTY_OUTFIT_WARNING)
    return warnings


__all__ = [
    "SHIRT_LIKE_SUBCATEGORIES",
    "is_dress",
    "is_blazer",
    "is_lower_body",
    "is_shirt_like",
    "collect_warnings",
    "is_valid_combo",
    "validate_outfit",
]
