"""Outfit suggestion entry points: enumerate, score, deduplicate and rank."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from logic.combo_rules import validate_outfit
from logic.outfit_builder import OutfitCombo, build_combos
from logic.outfit_scoring import score_combo
from models.clothing_item import ClothingItem
from models.outfit import SuggestionResult
from models.taxonomy import validate_occasion, validate_season

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 6
MIN_POOL_SIZE = 2


def _canonical_key(items: Sequence[ClothingItem]) -> Tuple[str, ...]:
    return tuple(sorted(item.item_id for item in items))


def rank_suggestions(results: Sequence[SuggestionResult], max_results: int) -> List[SuggestionResult]:
    """Sort by score, keep the best entry per item set and truncate."""

    ordered = sorted(results, key=lambda result: result.score, reverse=True)
    seen = set()
    unique: List[SuggestionResult] = []
    for result in ordered:
        if len(unique) >= max_results:
            break
        key = _canonical_key(result.items)
        if key in seen:
            continue
        seen.add(key)
        unique.append(result)
    return unique


def score_combos(
    combos: Sequence[OutfitCombo], occasion: Optional[str] = None, season: Optional[str] = None
) -> List[SuggestionResult]:
    """Score every combo, silently dropping the seasonally blocked ones."""

    scored: List[SuggestionResult] = []
    for combo in combos:
        result = score_combo(combo, occasion=occasion, season=season)
        if result.blocked:
            continue
        scored.append(SuggestionResult(items=list(combo), score=result.score, reasons=list(result.reasons)))
    return scored


def suggest_outfits(
    items: Sequence[ClothingItem],
    occasion: Optional[str] = None,
    season: Optional[str] = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[SuggestionResult]:
    """Return up to ``max_results`` outfit suggestions, best first.

    An empty list is a normal outcome: too few items, no valid combination or
    everything blocked for the requested season.
    """

    if len(items) < MIN_POOL_SIZE or max_results < 1:
        return []
    if occasion is not None:
        occasion = validate_occasion(occasion)
    if season is not None:
        season = validate_season(season)

    combos = build_combos(items)
    scored = score_combos(combos, occasion=occasion, season=season)
    ranked = rank_suggestions(scored, max_results)
    logger.debug(
        "Ranked %s of %s scored combos (%s generated)", len(ranked), len(scored), len(combos)
    )
    return ranked


def suggestion_rating(score: float) -> int:
    """Translate a suggestion score into the 1-5 rating stored with a saved outfit."""

    return min(5, max(1, int(score / 20 + 0.5)))


__all__ = [
    "DEFAULT_MAX_RESULTS",
    "rank_suggestions",
    "score_combos",
    "suggest_outfits",
    "suggestion_rating",
    "validate_outfit",
]
