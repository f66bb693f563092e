"""Styling legality rules and the manual outfit validator."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.combo_rules import (
    BLAZER_NEEDS_SHIRT_WARNING,
    DRESS_WITH_BOTTOMS_WARNING,
    EMPTY_OUTFIT_WARNING,
    is_shirt_like,
    is_valid_combo,
    validate_outfit,
)
from models.clothing_item import ClothingItem


def _item(item_id: str, category: str, sub: str | None = None) -> ClothingItem:
    return ClothingItem(item_id=item_id, category=category, color="#445566", sub_category=sub)


DRESS = _item("dress", "dresses", "party_dress")
TROUSERS = _item("trousers", "bottoms", "trousers")
SKIRT = _item("skirt", "skirts", "midi_skirt")
TEE = _item("tee", "tops", "tshirt")
PLAIN_TOP = _item("plain", "tops")
CARDIGAN = _item("cardigan", "tops", "cardigan")
BLAZER = _item("blazer", "blazers", "formal_blazer")
ONE_PIECE = _item("one", "swimwear", "one_piece")
SWIM_TOP = _item("stop", "swimwear", "swim_top")
SWIM_BOTTOM = _item("sbottom", "swimwear", "swim_bottom")


def test_shirt_like_allow_list():
    assert is_shirt_like(TEE)
    assert is_shirt_like(PLAIN_TOP)
    assert not is_shirt_like(CARDIGAN)
    assert not is_shirt_like(BLAZER)


def test_dress_never_with_lower_body_items():
    assert not is_valid_combo([DRESS, TROUSERS])
    assert is_valid_combo([DRESS])


def test_skirts_and_shorts_count_as_lower_body_next_to_a_dress():
    shorts = _item("shorts", "shorts", "casual_shorts")
    assert not is_valid_combo([DRESS, SKIRT])
    assert not is_valid_combo([DRESS, shorts])
    assert validate_outfit([DRESS, shorts]) == [DRESS_WITH_BOTTOMS_WARNING]


def test_blazer_requires_shirt_or_dress():
    assert not is_valid_combo([BLAZER, TROUSERS])
    assert not is_valid_combo([CARDIGAN, TROUSERS, BLAZER])
    assert is_valid_combo([TEE, TROUSERS, BLAZER])
    assert is_valid_combo([PLAIN_TOP, TROUSERS, BLAZER])
    assert is_valid_combo([DRESS, BLAZER])


def test_swimwear_exclusivity():
    assert not is_valid_combo([ONE_PIECE, SWIM_TOP])
    assert not is_valid_combo([ONE_PIECE, SWIM_BOTTOM])
    assert is_valid_combo([SWIM_TOP, SWIM_BOTTOM])
    assert not is_valid_combo([SWIM_TOP, TEE])
    assert not is_valid_combo([ONE_PIECE, TROUSERS])


def test_validate_outfit_reports_each_rule():
    assert validate_outfit([TEE, TROUSERS]) == []
    assert validate_outfit([DRESS, TROUSERS]) == [DRESS_WITH_BOTTOMS_WARNING]
    assert validate_outfit([DRESS, SKIRT]) == [DRESS_WITH_BOTTOMS_WARNING]
    assert validate_outfit([BLAZER]) == [BLAZER_NEEDS_SHIRT_WARNING]
    assert "shirt" in validate_outfit([BLAZER, TROUSERS])[0]
    assert validate_outfit([]) == [EMPTY_OUTFIT_WARNING]
    warnings = validate_outfit([ONE_PIECE, SWIM_TOP, TEE, TROUSERS])
    assert len(warnings) == 3


def test_validate_outfit_leaves_input_untouched():
    selection = [DRESS, TROUSERS, BLAZER]
    snapshot = list(selection)
    validate_outfit(selection)
    assert selection == snapshot
