"""Deterministic outfit assembly: category templates, combo enumeration and enrichment."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from logic.combo_rules import is_valid_combo
from models.clothing_item import ClothingItem
from models.taxonomy import ACCESSORY_CATEGORIES

logger = logging.getLogger(__name__)

OutfitCombo = Tuple[ClothingItem, ...]

# Hand-curated outfit shapes. Only these category tuples are ever enumerated.
CATEGORY_TEMPLATES: Tuple[Tuple[str, ...], ...] = (
    # separates
    ("tops", "bottoms"),
    ("tops", "bottoms", "shoes"),
    ("tops", "bottoms", "jackets"),
    ("tops", "bottoms", "jackets", "shoes"),
    ("tops", "bottoms", "accessories"),
    ("tops", "bottoms", "shoes", "accessories"),
    ("tops", "bottoms", "shoes", "purse"),
    ("tops", "bottoms", "jackets", "shoes", "accessories"),
    ("tops", "skirts"),
    ("tops", "skirts", "shoes"),
    ("tops", "skirts", "shoes", "accessories"),
    ("tops", "shorts"),
    ("tops", "shorts", "shoes"),
    # blazer
    ("tops", "bottoms", "blazers"),
    ("tops", "bottoms", "blazers", "shoes"),
    ("tops", "bottoms", "blazers", "shoes", "accessories"),
    ("tops", "bottoms", "blazers", "jackets", "shoes"),
    # dresses
    ("dresses",),
    ("dresses", "shoes"),
    ("dresses", "jackets"),
    ("dresses", "shoes", "jackets"),
    ("dresses", "accessories"),
    ("dresses", "shoes", "accessories"),
    ("dresses", "shoes", "purse"),
    ("dresses", "jackets", "shoes", "accessories"),
    ("dresses", "blazers"),
    ("dresses", "blazers", "shoes"),
    # jumpsuits
    ("jumpsuits",),
    ("jumpsuits", "shoes"),
    ("jumpsuits", "shoes", "accessories"),
    # swimwear
    ("swimwear",),
    ("swimwear", "accessories"),
    ("swimwear", "shoes"),
    ("swimwear", "shoes", "accessories"),
)

BELT_SUBCATEGORY = "belts"
JEWELRY_PRIORITY: Tuple[str, ...] = ("earrings", "necklaces", "bracelets", "rings")
MAX_JEWELRY_PIECES = 2


def group_by_category(items: Iterable[ClothingItem]) -> Dict[str, List[ClothingItem]]:
    """Bucket items by category, keeping the caller's order inside each bucket."""

    grouped: Dict[str, List[ClothingItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)
    return grouped


def accessory_pool(grouped: Dict[str, List[ClothingItem]]) -> List[ClothingItem]:
    return [item for category in ACCESSORY_CATEGORIES for item in grouped.get(category, [])]


def pick_one_per_category(
    grouped: Dict[str, List[ClothingItem]], categories: Sequence[str]
) -> List[OutfitCombo]:
    """Cartesian product choosing one item per category, first category outermost.

    Returns an empty list as soon as any requested category has no items.
    """

    combos: List[OutfitCombo] = [()]
    for category in reversed(categories):
        pool = grouped.get(category, [])
        if not pool:
            return []
        combos = [(item,) + rest for item in pool for rest in combos]
    return combos


def generate_valid_combos(
    grouped: Dict[str, List[ClothingItem]],
    templates: Sequence[Sequence[str]] = CATEGORY_TEMPLATES,
) -> List[OutfitCombo]:
    """Enumerate every template and drop combos that break a styling rule."""

    valid: List[OutfitCombo] = []
    rejected = 0
    for template in templates:
        for combo in pick_one_per_category(grouped, template):
            if is_valid_combo(combo):
                valid.append(combo)
            else:
                rejected += 1
    logger.debug("Generated %s valid combos (%s rejected)", len(valid), rejected)
    return valid


def enrich_with_accessories(combo: OutfitCombo, accessories: Sequence[ClothingItem]) -> OutfitCombo:
    """Append a belt to combos with bottoms and jewelry to blazer looks."""

    if not accessories:
        return combo

    used_subs = {
        item.sub_category
        for item in combo
        if item.category in ACCESSORY_CATEGORIES and item.sub_category
    }
    used_ids = {item.item_id for item in combo}
    extras: List[ClothingItem] = []

    def _first_with(sub_category: str) -> ClothingItem | None:
        for candidate in accessories:
            if candidate.sub_category == sub_category and candidate.item_id not in used_ids:
                return candidate
        return None

    if any(item.category == "bottoms" for item in combo) and BELT_SUBCATEGORY not in used_subs:
        belt = _first_with(BELT_SUBCATEGORY)
        if belt is not None:
            extras.append(belt)
            used_subs.add(BELT_SUBCATEGORY)
            used_ids.add(belt.item_id)

    if any(item.category == "blazers" for item in combo):
        added = 0
        for sub_category in JEWELRY_PRIORITY:
            if added >= MAX_JEWELRY_PIECES:
                break
            if sub_category in used_subs:
                continue
            piece = _first_with(sub_category)
            if piece is not None:
                extras.append(piece)
                used_subs.add(sub_category)
                used_ids.add(piece.item_id)
                added += 1

    return combo + tuple(extras)


def build_combos(items: Sequence[ClothingItem]) -> List[OutfitCombo]:
    """Generate, validate and enrich every candidate combo for an item pool."""

    grouped = group_by_category(items)
    accessories = accessory_pool(grouped)
    return [enrich_with_accessories(combo, accessories) for combo in generate_valid_combos(grouped)]


__all__ = [
    "CATEGORY_TEMPLATES",
    "JEWELRY_PRIORITY",
    "OutfitCombo",
    "group_by_category",
    "accessory_pool",
    "pick_one_per_category",
    "generate_valid_combos",
    "enrich_with_accessories",
    "build_combos",
]
