"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from models.taxonomy import (
    CATEGORIES,
    FABRIC_TYPES,
    OCCASIONS,
    is_hex_color,
    normalise_tags,
    normalize_hex_color,
    normalize_subcategory,
    validate_category,
    validate_fabric,
)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def _pick(metadata: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = metadata.get(key)
        if value not in (None, ""):
            return value
    return None


@dataclass(frozen=True)
class ClothingItem:
    """Represents a single wardrobe item as seen by the outfit engine.

    Items are immutable snapshots handed over by the item store; the engine
    only ever reads them.
    """

    item_id: str
    category: str
    color: str
    fabric_type: str = "other"
    sub_category: Optional[str] = None
    secondary_color: Optional[str] = None
    occasions: Tuple[str, ...] = field(default_factory=tuple)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.item_id:
            raise ValueError("ClothingItem requires a non-empty item_id")
        if self.category not in CATEGORIES:
            raise ValueError(f"Unsupported category '{self.category}'. Allowed: {sorted(CATEGORIES)}")
        if self.fabric_type not in FABRIC_TYPES:
            raise ValueError(f"Unsupported fabric '{self.fabric_type}'. Allowed: {sorted(FABRIC_TYPES)}")
        if not is_hex_color(self.color):
            raise ValueError(f"Color '{self.color}' is not a #rrggbb hex value")
        if self.secondary_color is not None and not is_hex_color(self.secondary_color):
            raise ValueError(f"Secondary color '{self.secondary_color}' is not a #rrggbb hex value")
        unknown = [occasion for occasion in self.occasions if occasion not in OCCASIONS]
        if unknown:
            raise ValueError(f"Unsupported occasions {unknown}. Allowed: {list(OCCASIONS)}")

    @property
    def color_slots(self) -> List[str]:
        """Primary color followed by the secondary color when present."""

        if self.secondary_color:
            return [self.color, self.secondary_color]
        return [self.color]


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from loose item-store metadata.

    Accepts both the snake_case field names and the camelCase keys the mobile
    client stores (``id``, ``subCategory``, ``secondaryColor``,
    ``fabricType``).
    """

    item_id = _pick(metadata, "item_id", "id")
    category = _pick(metadata, "category")
    color = _pick(metadata, "color")
    missing = [
        name
        for name, value in (("item_id", item_id), ("category", category), ("color", color))
        if value is None
    ]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    secondary = _pick(metadata, "secondary_color", "secondaryColor")
    fabric = _pick(metadata, "fabric_type", "fabricType") or "other"
    return ClothingItem(
        item_id=str(item_id),
        category=validate_category(str(category)),
        color=normalize_hex_color(str(color)),
        fabric_type=validate_fabric(str(fabric)),
        sub_category=normalize_subcategory(_pick(metadata, "sub_category", "subCategory")),
        secondary_color=normalize_hex_color(str(secondary)) if secondary else None,
        occasions=tuple(normalise_tags(_ensure_list(metadata.get("occasions")), OCCASIONS)),
        name=metadata.get("name"),
    )


__all__ = ["ClothingItem", "from_raw_metadata"]
