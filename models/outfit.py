"""Outfit suggestion schemas."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from models.clothing_item import ClothingItem

@dataclass(frozen=True)
class SuggestionResult:
    items: List[ClothingItem]
    score: float
    reasons: List[str] = field(default_factory=list)

    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [asdict(item) for item in self.items],
            "item_ids": self.item_ids(),
            "score": self.score,
            "reasons": list(self.reasons),
        }
