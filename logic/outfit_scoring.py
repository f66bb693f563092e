"""Deterministic scoring for candidate outfits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from logic.seasonal_fit import HARD_BLOCK, seasonal_score
from models.clothing_item import ClothingItem
from models.color_theory import outfit_color_score
from models.taxonomy import CASUAL_FABRICS, FORMAL_FABRICS

WEIGHTS = {
    "color": 40.0,
    "fabric": 25.0,
    "season": 20.0,
    "season_baseline": 10.0,
    "occasion_baseline": 10.0,
    "shoes_bonus": 2.0,
    "accessories_bonus": 1.0,
}

REASON_THRESHOLDS = {
    "excellent_color": 0.85,
    "good_color": 0.7,
    "fabric": 0.8,
    "season": 0.85,
}

BLOCKED_SCORE = -1.0


@dataclass(frozen=True)
class ComboScore:
    score: float
    reasons: List[str] = field(default_factory=list)
    blocked: bool = False


def fabric_compatibility(items: Sequence[ClothingItem]) -> float:
    """Score how well the fabrics mix; balanced formal/casual blends beat lopsided ones."""

    fabrics = [item.fabric_type for item in items]
    if len(set(fabrics)) == 1:
        return 0.9

    formal_count = sum(1 for fabric in fabrics if fabric in FORMAL_FABRICS)
    casual_count = sum(1 for fabric in fabrics if fabric in CASUAL_FABRICS)
    if formal_count and casual_count:
        balance = min(formal_count, casual_count) / max(formal_count, casual_count)
        return 0.6 + balance * 0.2
    return 0.85


def score_combo(
    combo: Sequence[ClothingItem],
    occasion: Optional[str] = None,
    season: Optional[str] = None,
) -> ComboScore:
    """Weighted sum of the harmony models plus completeness bonuses.

    ``occasion`` only contributes a flat baseline. A seasonal hard block
    short-circuits to ``BLOCKED_SCORE``.
    """

    score = 0.0
    reasons: List[str] = []

    color = outfit_color_score(list(combo))
    score += color.score * WEIGHTS["color"]
    if color.score > REASON_THRESHOLDS["excellent_color"]:
        reasons.append("Excellent color harmony")
    elif color.score > REASON_THRESHOLDS["good_color"]:
        reasons.append("Good color pairing")

    fabric = fabric_compatibility(combo)
    score += fabric * WEIGHTS["fabric"]
    if fabric > REASON_THRESHOLDS["fabric"]:
        reasons.append("Well-balanced fabrics")

    if season:
        season_fit = seasonal_score(combo, season)
        if season_fit == HARD_BLOCK:
            return ComboScore(score=BLOCKED_SCORE, reasons=[], blocked=True)
        score += season_fit * WEIGHTS["season"]
        if season_fit > REASON_THRESHOLDS["season"]:
            reasons.append(f"Great for {season}")
    else:
        score += WEIGHTS["season_baseline"]

    score += WEIGHTS["occasion_baseline"]

    categories = {item.category for item in combo}
    if "shoes" in categories:
        score += WEIGHTS["shoes_bonus"]
        reasons.append("Complete with shoes")
    if "accessories" in categories:
        score += WEIGHTS["accessories_bonus"]
    if "dresses" in categories:
        reasons.append("Dress-based look")
    if "blazers" in categories:
        reasons.append("Polished with blazer")

    return ComboScore(score=score, reasons=reasons)


__all__ = ["WEIGHTS", "REASON_THRESHOLDS", "BLOCKED_SCORE", "ComboScore", "fabric_compatibility", "score_combo"]
