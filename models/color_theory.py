"""Hue/saturation/lightness color harmony scoring for outfit ranking."""
from __future__ import annotations

import colorsys
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple

from models.clothing_item import ClothingItem

logger = logging.getLogger(__name__)

NEUTRAL_SATURATION_MAX = 15
NEUTRAL_LIGHTNESS_MIN = 15
NEUTRAL_LIGHTNESS_MAX = 90
GREAT_HARMONY_THRESHOLD = 0.78
SINGLE_ITEM_SCORE = 0.85


class HSL(NamedTuple):
    h: int
    s: int
    l: int  # noqa: E741


@dataclass(frozen=True)
class ColorHarmonyResult:
    """Represents the outcome of an outfit harmony evaluation."""

    score: float
    has_great_harmony: bool
    pair_count: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert ``#rrggbb`` into whole-number hue degrees and percentages."""

    red = int(hex_color[1:3], 16) / 255
    green = int(hex_color[3:5], 16) / 255
    blue = int(hex_color[5:7], 16) / 255
    hue, lightness, saturation = colorsys.rgb_to_hls(red, green, blue)
    return HSL(
        h=_round_half_up(hue * 360) % 360,
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def is_neutral(hex_color: str) -> bool:
    """Return True for low-saturation or extreme-lightness colors."""

    hsl = hex_to_hsl(hex_color)
    return (
        hsl.s < NEUTRAL_SATURATION_MAX
        or hsl.l < NEUTRAL_LIGHTNESS_MIN
        or hsl.l > NEUTRAL_LIGHTNESS_MAX
    )


def hue_distance(first: int, second: int) -> int:
    diff = abs(first - second)
    return min(diff, 360 - diff)


def _hue_band_score(hue_diff: int, light_diff: int) -> float:
    if hue_diff < 10:
        return 0.88 if light_diff > 15 else 0.72
    if hue_diff < 30:
        return 0.85
    if hue_diff < 60:
        return 0.75
    if 120 < hue_diff < 150:
        return 0.78
    if 110 < hue_diff <= 130:
        return 0.73
    if 150 <= hue_diff <= 210:
        return 0.9
    if 80 < hue_diff <= 100:
        return 0.65
    return 0.4


def color_compatibility(hex1: str, hex2: str) -> float:
    """Score how well two colors sit together, in ``[0, 1]``."""

    neutral1 = is_neutral(hex1)
    neutral2 = is_neutral(hex2)
    if neutral1 and neutral2:
        return 0.9
    if neutral1 or neutral2:
        return 0.85

    c1, c2 = hex_to_hsl(hex1), hex_to_hsl(hex2)
    hue_diff = hue_distance(c1.h, c2.h)

    sat_diff = abs(c1.s - c2.s)
    if sat_diff < 20:
        sat_bonus = 0.05
    elif sat_diff < 40:
        sat_bonus = 0.02
    else:
        sat_bonus = 0.0

    light_diff = abs(c1.l - c2.l)
    light_bonus = 0.05 if 15 < light_diff < 50 else 0.0

    score = _hue_band_score(hue_diff, light_diff) + sat_bonus + light_bonus
    logger.debug("color pair (%s, %s) hue_diff=%s -> %.3f", hex1, hex2, hue_diff, score)
    return max(0.0, min(1.0, score))


def _color_slots(items: Iterable[ClothingItem]) -> List[str]:
    return [color for item in items for color in item.color_slots]


def outfit_color_score(items: List[ClothingItem]) -> ColorHarmonyResult:
    """Average pairwise compatibility over every primary and secondary color."""

    if len(items) < 2:
        return ColorHarmonyResult(score=SINGLE_ITEM_SCORE, has_great_harmony=False, pair_count=0)

    colors = _color_slots(items)
    total = 0.0
    pairs = 0
    for i in range(len(colors)):
        for j in range(i + 1, len(colors)):
            total += color_compatibility(colors[i], colors[j])
            pairs += 1

    if pairs == 0:
        return ColorHarmonyResult(score=SINGLE_ITEM_SCORE, has_great_harmony=False, pair_count=0)

    average = total / pairs
    return ColorHarmonyResult(
        score=average,
        has_great_harmony=average > GREAT_HARMONY_THRESHOLD,
        pair_count=pairs,
    )


__all__ = [
    "HSL",
    "ColorHarmonyResult",
    "hex_to_hsl",
    "is_neutral",
    "hue_distance",
    "color_compatibility",
    "outfit_color_score",
    "GREAT_HARMONY_THRESHOLD",
]
