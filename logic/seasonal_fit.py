"""Per-item seasonal fitness with hard-block semantics."""

from __future__ import annotations

from typing import Sequence

from models.clothing_item import ClothingItem
from models.color_theory import hex_to_hsl
from models.taxonomy import LOWER_BODY_CATEGORIES

HARD_BLOCK = 0.0
DEFAULT_FIT = 0.9
OFF_SEASON_FIT = 0.1
LIGHT_BOTTOMS_WINTER_FIT = 0.3
LIGHT_BOTTOMS_LIGHTNESS = 90

YEAR_ROUND_SUBS = frozenset(
    {
        "blazer",
        "casual_blazer",
        "formal_blazer",
        "sport_coat",
        "sweater",
        "hoodie",
        "sweatshirt",
        "work_jacket",
    }
)
LAYERING_TOP_SUBS = frozenset({"sweater", "hoodie", "sweatshirt"})

WINTER_ONLY_SUBS = frozenset({"winter_boots", "ski_jacket", "parka"})
SUMMER_ONLY_SUBS = frozenset({"sandals", "sundress"})
WARM_SEASON_SUBS = frozenset({"shorts", "tank_top", "sandals", "sundress", "cover_up"})
WARM_SEASON_CATEGORIES = frozenset({"shorts"})
COLD_SEASON_SUBS = frozenset({"winter_boots", "parka", "ski_jacket"})

TRANSITIONAL_JACKET_FIT = {"spring": 1.0, "fall": 1.0, "summer": 0.6, "winter": 0.7}
RAINCOAT_FIT = {"spring": 1.0, "fall": 1.0, "summer": 0.5, "winter": 0.5}
TRANSITIONAL_SUBS = frozenset({"jean_jacket", "spring_jacket"})


def item_seasonal_fit(item: ClothingItem, season: str) -> float:
    """Return how well a single item suits ``season``; ``0.0`` is a hard block."""

    sub = item.sub_category or ""

    if sub in YEAR_ROUND_SUBS or item.category == "blazers":
        return 1.0
    if item.category == "tops" and sub in LAYERING_TOP_SUBS:
        return 1.0

    if season == "winter":
        if sub in SUMMER_ONLY_SUBS:
            return HARD_BLOCK
        if sub in WARM_SEASON_SUBS or item.category in WARM_SEASON_CATEGORIES:
            return OFF_SEASON_FIT
    if season == "summer":
        if sub in WINTER_ONLY_SUBS:
            return HARD_BLOCK
        if sub in COLD_SEASON_SUBS:
            return OFF_SEASON_FIT

    if sub in TRANSITIONAL_SUBS:
        return TRANSITIONAL_JACKET_FIT.get(season, DEFAULT_FIT)
    if sub == "raincoat":
        return RAINCOAT_FIT.get(season, DEFAULT_FIT)

    # white trousers in winter read as a faux pas, white tops do not
    if season == "winter" and item.category in LOWER_BODY_CATEGORIES:
        if hex_to_hsl(item.color).l > LIGHT_BOTTOMS_LIGHTNESS:
            return LIGHT_BOTTOMS_WINTER_FIT

    return DEFAULT_FIT


def seasonal_score(items: Sequence[ClothingItem], season: str) -> float:
    """Mean item fit for the combo, or exactly ``HARD_BLOCK`` if any item blocks."""

    if not items:
        return DEFAULT_FIT
    fits = [item_seasonal_fit(item, season) for item in items]
    if any(fit == HARD_BLOCK for fit in fits):
        return HARD_BLOCK
    return sum(fits) / len(fits)


def season_for_temperature(celsius: float) -> str:
    """Map an ambient temperature onto the season hint the engine accepts."""

    if celsius >= 25:
        return "summer"
    if celsius >= 15:
        return "spring"
    if celsius >= 5:
        return "fall"
    return "winter"


__all__ = [
    "HARD_BLOCK",
    "WINTER_ONLY_SUBS",
    "SUMMER_ONLY_SUBS",
    "item_seasonal_fit",
    "seasonal_score",
    "season_for_temperature",
]
