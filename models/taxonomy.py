"""Canonical taxonomy definitions for clothing items.

This module centralises the canonical labels for categories, fabrics,
occasions and seasons, along with the subcategory tags the styling rules key
on. Helper functions keep validation logic consistent across the engine, the
HTTP payloads and the evaluation scenarios.
"""

import re
from typing import Dict, Iterable, List, Optional, Tuple


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_").replace("-", "_")


CATEGORIES: Tuple[str, ...] = (
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
)

LOWER_BODY_CATEGORIES: Tuple[str, ...] = ("bottoms", "shorts", "skirts")
ACCESSORY_CATEGORIES: Tuple[str, ...] = ("accessories", "jewelry")

# Known subcategory tags per category. Unknown tags are accepted on items,
# these lists only document the vocabulary the rules understand.
SUBCATEGORIES: Dict[str, List[str]] = {
    "tops": [
        "blouse",
        "long_sleeve",
        "tshirt",
        "tank_top",
        "polo",
        "sweater",
        "cardigan",
        "sweatshirt",
        "hoodie",
        "zip_up",
        "workout_shirt",
    ],
    "bottoms": ["trousers", "jeans", "casual_pants", "leggings", "joggers", "other"],
    "shorts": ["casual_shorts", "athletic_shorts", "dressy_shorts", "skort"],
    "skirts": ["mini_skirt", "midi_skirt", "maxi_skirt"],
    "dresses": ["work_dress", "casual_dress", "formal_dress", "party_dress", "sundress", "cover_up"],
    "jumpsuits": ["casual_jumpsuit", "dressy_jumpsuit"],
    "blazers": ["casual_blazer", "formal_blazer", "sport_coat"],
    "jackets": ["spring_jacket", "jean_jacket", "work_jacket", "raincoat", "parka", "ski_jacket"],
    "shoes": [
        "flats",
        "loafers",
        "heels",
        "sandals",
        "ankle_boots",
        "dress_boots",
        "knee_boots",
        "winter_boots",
        "running_shoes",
        "soccer_shoes",
    ],
    "accessories": ["belts", "hats", "sunglasses", "scarves", "hair_pieces", "stockings", "bags"],
    "purse": ["clutch", "tote", "crossbody", "shoulder_bag"],
    "jewelry": ["earrings", "necklaces", "bracelets", "rings", "watches"],
    "swimwear": ["one_piece", "swim_top", "swim_bottom", "cover_up"],
}

FORMAL_FABRICS: Tuple[str, ...] = ("silk", "wool", "cashmere", "leather", "satin")
CASUAL_FABRICS: Tuple[str, ...] = ("cotton", "denim", "linen", "nylon", "polyester", "fleece")
FABRIC_TYPES: Tuple[str, ...] = FORMAL_FABRICS + CASUAL_FABRICS + ("other",)

OCCASIONS: Tuple[str, ...] = ("casual", "work", "fancy", "party", "vacation")
SEASONS: Tuple[str, ...] = ("spring", "summer", "fall", "winter")

_HEX_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    key = _normalize_key(value)
    if key not in CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {sorted(CATEGORIES)}")
    return key


def normalize_subcategory(value: Optional[str]) -> Optional[str]:
    """Return a normalised subcategory tag, or ``None`` for blank input."""

    if value is None:
        return None
    key = _normalize_key(str(value))
    return key or None


def validate_fabric(value: str) -> str:
    key = _normalize_key(value)
    if key not in FABRIC_TYPES:
        raise ValueError(f"Unsupported fabric '{value}'. Allowed: {sorted(FABRIC_TYPES)}")
    return key


def validate_season(value: str) -> str:
    key = _normalize_key(value)
    if key not in SEASONS:
        raise ValueError(f"Unsupported season '{value}'. Allowed: {list(SEASONS)}")
    return key


def validate_occasion(value: str) -> str:
    key = _normalize_key(value)
    if key not in OCCASIONS:
        raise ValueError(f"Unsupported occasion '{value}'. Allowed: {list(OCCASIONS)}")
    return key


def is_hex_color(value: str) -> bool:
    return bool(_HEX_PATTERN.match(value or ""))


def normalize_hex_color(raw_string: str) -> str:
    """Map a raw ``#rrggbb`` string to its canonical lower-case form."""

    key = str(raw_string).strip().lower()
    if key and not key.startswith("#"):
        key = f"#{key}"
    if not is_hex_color(key):
        raise ValueError(f"Color '{raw_string}' is not a #rrggbb hex value")
    return key


def normalise_tags(values: Iterable[str], allowed: Iterable[str]) -> List[str]:
    """Normalise and deduplicate tags against an allowed set."""

    allowed_set = set(allowed)
    normalised = []
    seen = set()
    for value in values:
        key = _normalize_key(str(value))
        if key in allowed_set and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


__all__ = [
    "CATEGORIES",
    "LOWER_BODY_CATEGORIES",
    "ACCESSORY_CATEGORIES",
    "SUBCATEGORIES",
    "FORMAL_FABRICS",
    "CASUAL_FABRICS",
    "FABRIC_TYPES",
    "OCCASIONS",
    "SEASONS",
    "validate_category",
    "normalize_subcategory",
    "validate_fabric",
    "validate_season",
    "validate_occasion",
    "is_hex_color",
    "normalize_hex_color",
    "normalise_tags",
]
