"""End-to-end properties of the outfit suggestion engine."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.combo_rules import is_valid_combo, validate_outfit
from logic.seasonal_fit import SUMMER_ONLY_SUBS, WINTER_ONLY_SUBS
from logic.suggestion_engine import rank_suggestions, suggest_outfits, suggestion_rating
from models.clothing_item import ClothingItem
from models.outfit import SuggestionResult
from models.taxonomy import ACCESSORY_CATEGORIES


def _item(
    item_id: str,
    category: str,
    color: str,
    fabric: str = "cotton",
    sub: str | None = None,
    secondary: str | None = None,
) -> ClothingItem:
    return ClothingItem(
        item_id=item_id,
        category=category,
        color=color,
        fabric_type=fabric,
        sub_category=sub,
        secondary_color=secondary,
    )


@pytest.fixture()
def wardrobe() -> List[ClothingItem]:
    return [
        _item("tee_white", "tops", "#f8f8f8", "cotton", "tshirt"),
        _item("blouse_blue", "tops", "#3366cc", "silk", "blouse", secondary="#ffffff"),
        _item("cardigan_rust", "tops", "#b7410e", "wool", "cardigan"),
        _item("jeans_indigo", "bottoms", "#2b4c7e", "denim", "jeans"),
        _item("trousers_cream", "bottoms", "#fdfbf3", "wool", "trousers"),
        _item("skirt_green", "skirts", "#2e8b57", "linen", "midi_skirt"),
        _item("dress_red", "dresses", "#b22222", "satin", "party_dress"),
        _item("sundress_yellow", "dresses", "#f4d03f", "cotton", "sundress"),
        _item("blazer_navy", "blazers", "#1c2541", "wool", "formal_blazer"),
        _item("parka_olive", "jackets", "#556b2f", "nylon", "parka"),
        _item("jean_jacket", "jackets", "#5d7fa3", "denim", "jean_jacket"),
        _item("sandals_tan", "shoes", "#c19a6b", "leather", "sandals"),
        _item("boots_winter", "shoes", "#3b2f2f", "leather", "winter_boots"),
        _item("loafers_black", "shoes", "#151515", "leather", "loafers"),
        _item("belt_brown", "accessories", "#5c4033", "leather", "belts"),
        _item("scarf_gray", "accessories", "#9e9e9e", "cashmere", "scarves"),
        _item("earrings_gold", "jewelry", "#d4af37", "other", "earrings"),
        _item("necklace_silver", "jewelry", "#c0c0c0", "other", "necklaces"),
        _item("one_piece", "swimwear", "#008080", "nylon", "one_piece"),
    ]


def _key(result: SuggestionResult) -> tuple:
    return tuple(sorted(result.item_ids()))


def test_empty_and_single_item_pools_return_nothing():
    assert suggest_outfits([]) == []
    assert suggest_outfits([_item("solo", "dresses", "#b22222")]) == []


def test_results_are_deterministic(wardrobe):
    first = suggest_outfits(wardrobe, season="fall", max_results=10)
    second = suggest_outfits(list(wardrobe), season="fall", max_results=10)
    assert [r.item_ids() for r in first] == [r.item_ids() for r in second]
    assert [r.score for r in first] == [r.score for r in second]
    assert [r.reasons for r in first] == [r.reasons for r in second]


def test_results_are_unique_and_sorted(wardrobe):
    results = suggest_outfits(wardrobe, max_results=50)
    keys = [_key(result) for result in results]
    assert len(keys) == len(set(keys))
    scores = [result.score for result in results]
    assert scores == sorted(scores, reverse=True)


@pytest.mark.parametrize("season", [None, "spring", "summer", "fall", "winter"])
def test_results_respect_styling_rules(wardrobe, season):
    for result in suggest_outfits(wardrobe, season=season, max_results=50):
        assert is_valid_combo(result.items)
        assert validate_outfit(result.items) == []
        core = [item.category for item in result.items if item.category not in ACCESSORY_CATEGORIES]
        assert len(core) == len(set(core))
        subs = [item.sub_category for item in result.items if item.category in ACCESSORY_CATEGORIES]
        assert len(subs) == len(set(subs))


def test_winter_never_suggests_summer_only_items(wardrobe):
    results = suggest_outfits(wardrobe, season="winter", max_results=50)
    assert results
    assert not any(item.sub_category in SUMMER_ONLY_SUBS for r in results for item in r.items)


def test_summer_never_suggests_winter_only_items(wardrobe):
    results = suggest_outfits(wardrobe, season="summer", max_results=50)
    assert results
    assert not any(item.sub_category in WINTER_ONLY_SUBS for r in results for item in r.items)


@pytest.mark.parametrize("max_results", [0, 1, 3, 6])
def test_cardinality_bound(wardrobe, max_results):
    assert len(suggest_outfits(wardrobe, max_results=max_results)) <= max_results


def test_default_max_results_is_six(wardrobe):
    assert len(suggest_outfits(wardrobe)) == 6


def test_inputs_are_not_mutated(wardrobe):
    snapshot = list(wardrobe)
    suggest_outfits(wardrobe, season="winter")
    assert wardrobe == snapshot


def test_neutral_basics_example():
    top = _item("A", "tops", "#808080", "cotton", "tshirt")
    bottoms = _item("B", "bottoms", "#7a7a7a", "denim", "jeans")
    shoes = _item("C", "shoes", "#000000", "leather", "loafers")
    results = suggest_outfits([top, bottoms, shoes])
    full = [result for result in results if set(result.item_ids()) == {"A", "B", "C"}]
    assert len(full) == 1
    assert full[0].score == pytest.approx(0.9 * 40 + 0.7 * 25 + 10 + 10 + 2)
    assert "Excellent color harmony" in full[0].reasons
    assert "Complete with shoes" in full[0].reasons
    # the shoeless pair ranks first: cotton with denim scores 0.85 on fabric
    assert [sorted(result.item_ids()) for result in results] == [["A", "B"], ["A", "B", "C"]]


def test_dress_and_bottoms_example():
    dress = _item("D", "dresses", "#b22222", "silk", "party_dress")
    bottoms = _item("B", "bottoms", "#0a0a0a", "wool", "trousers")
    results = suggest_outfits([dress, bottoms])
    assert len(results) <= 1
    assert all(result.item_ids() == ["D"] for result in results)
    warnings = validate_outfit([dress, bottoms])
    assert warnings and "dress" in warnings[0].lower()


def test_orphan_blazer_example():
    blazer = _item("Z", "blazers", "#1c2541", "wool", "formal_blazer")
    pool = [
        _item("K", "tops", "#d8c3a5", "wool", "cardigan"),
        _item("P", "bottoms", "#1f2a44", "cotton", "casual_pants"),
        blazer,
        _item("L", "shoes", "#5c4033", "leather", "loafers"),
    ]
    results = suggest_outfits(pool, max_results=50)
    assert results
    assert not any("Z" in result.item_ids() for result in results)
    assert any("shirt" in warning for warning in validate_outfit([blazer]))


def test_duplicate_item_sets_collapse():
    pool = [
        _item("t", "tops", "#808080", "cotton"),
        _item("b", "bottoms", "#7a7a7a", "denim"),
        _item("belt", "accessories", "#111111", "leather", "belts"),
    ]
    results = suggest_outfits(pool, max_results=10)
    assert [sorted(result.item_ids()) for result in results] == [["b", "belt", "t"]]


def test_everything_blocked_returns_empty():
    pool = [_item("sd", "dresses", "#f4d03f", "cotton", "sundress"), _item("s", "shoes", "#c19a6b", "leather", "sandals")]
    assert suggest_outfits(pool, season="winter") == []
    assert suggest_outfits(pool, season="summer")


def test_rank_suggestions_keeps_highest_per_key():
    a = _item("a", "tops", "#808080")
    b = _item("b", "bottoms", "#808080")
    low = SuggestionResult(items=[a, b], score=10.0, reasons=["low"])
    high = SuggestionResult(items=[b, a], score=20.0, reasons=["high"])
    ranked = rank_suggestions([low, high], max_results=5)
    assert ranked == [high]


def test_rank_suggestions_keeps_ids_containing_commas_apart():
    a_b = _item("a,b", "tops", "#808080")
    c = _item("c", "bottoms", "#808080")
    a = _item("a", "tops", "#808080")
    b_c = _item("b,c", "bottoms", "#808080")
    first = SuggestionResult(items=[a_b, c], score=20.0, reasons=[])
    second = SuggestionResult(items=[a, b_c], score=10.0, reasons=[])
    assert rank_suggestions([first, second], max_results=5) == [first, second]


def test_unknown_season_is_rejected(wardrobe):
    with pytest.raises(ValueError):
        suggest_outfits(wardrobe, season="monsoon")


@pytest.mark.parametrize("score, rating", [(-5, 1), (0, 1), (29, 1), (30, 2), (75.5, 4), (90, 5), (130, 5)])
def test_suggestion_rating(score, rating):
    assert suggestion_rating(score) == rating
