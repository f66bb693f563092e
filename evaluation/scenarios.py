"""Evaluation scenarios exercising color, styling-rule and seasonal behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class EvaluationScenario:
    name: str
    description: str
    wardrobe_items: List[Dict[str, object]]
    expectations: Dict[str, object]
    occasion: Optional[str] = None
    season: Optional[str] = None
    max_results: int = 6
    validate_item_ids: List[str] = field(default_factory=list)


def _item(item_id: str, category: str, color: str, fabric: str, sub: str | None = None) -> Dict[str, object]:
    raw: Dict[str, object] = {"id": item_id, "category": category, "color": color, "fabricType": fabric}
    if sub:
        raw["subCategory"] = sub
    return raw


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="neutral_basics",
        description="Gray tee, gray jeans and black shoes form a complete neutral look.",
        wardrobe_items=[
            _item("top_gray", "tops", "#808080", "cotton", "tshirt"),
            _item("jeans_gray", "bottoms", "#7a7a7a", "denim", "jeans"),
            _item("shoes_black", "shoes", "#111111", "leather", "loafers"),
        ],
        expectations={
            "min_outfits": 1,
            "required_item_sets": [["top_gray", "jeans_gray", "shoes_black"]],
            "required_reasons": ["Excellent color harmony", "Complete with shoes"],
        },
    ),
    EvaluationScenario(
        name="dress_with_bottoms",
        description="A dress and trousers can only surface as the dress on its own.",
        wardrobe_items=[
            _item("dress_red", "dresses", "#b22222", "silk", "party_dress"),
            _item("trousers_black", "bottoms", "#0a0a0a", "wool", "trousers"),
        ],
        expectations={
            "min_outfits": 1,
            "max_outfits": 1,
            "allowed_item_ids": ["dress_red"],
            "expected_warnings": ["dress"],
        },
        validate_item_ids=["dress_red", "trousers_black"],
    ),
    EvaluationScenario(
        name="orphan_blazer",
        description="A blazer without a shirt-like top is never generated and is flagged when hand-picked.",
        wardrobe_items=[
            _item("cardigan_beige", "tops", "#d8c3a5", "wool", "cardigan"),
            _item("chinos_navy", "bottoms", "#1f2a44", "cotton", "casual_pants"),
            _item("blazer_navy", "blazers", "#1c2541", "wool", "formal_blazer"),
            _item("loafers_brown", "shoes", "#5c4033", "leather", "loafers"),
        ],
        expectations={
            "min_outfits": 1,
            "forbidden_categories": ["blazers"],
            "expected_warnings": ["shirt"],
        },
        validate_item_ids=["blazer_navy", "chinos_navy"],
    ),
    EvaluationScenario(
        name="winter_without_sandals",
        description="Sandals are hard-blocked in winter even when they score well otherwise.",
        season="winter",
        wardrobe_items=[
            _item("sweater_cream", "tops", "#efe6d8", "wool", "sweater"),
            _item("jeans_blue", "bottoms", "#2b4c7e", "denim", "jeans"),
            _item("sandals_tan", "shoes", "#c19a6b", "leather", "sandals"),
            _item("boots_black", "shoes", "#151515", "leather", "ankle_boots"),
        ],
        expectations={"min_outfits": 1, "forbidden_subcategories": ["sandals"]},
    ),
    EvaluationScenario(
        name="summer_without_winter_boots",
        description="Winter boots and parkas never appear in summer suggestions.",
        season="summer",
        wardrobe_items=[
            _item("tank_white", "tops", "#fafafa", "linen", "tank_top"),
            _item("shorts_khaki", "bottoms", "#c3b091", "cotton", "other"),
            _item("winter_boots", "shoes", "#3b2f2f", "leather", "winter_boots"),
            _item("parka_olive", "jackets", "#556b2f", "nylon", "parka"),
            _item("sandals_white", "shoes", "#f5f5f5", "leather", "sandals"),
        ],
        expectations={"min_outfits": 1, "forbidden_subcategories": ["winter_boots", "parka"]},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
