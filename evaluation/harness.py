"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from evaluation.scenarios import EvaluationScenario, SCENARIOS
from logic.suggestion_engine import suggest_outfits, validate_outfit
from models.clothing_item import ClothingItem, from_raw_metadata
from models.outfit import SuggestionResult


def _evaluate_expectations(
    expectations: Dict[str, object], outfits: List[SuggestionResult], warnings: List[str]
) -> Dict[str, object]:
    checks: Dict[str, bool] = {}
    checks["min_outfits"] = len(outfits) >= int(expectations.get("min_outfits", 1))
    if "max_outfits" in expectations:
        checks["max_outfits"] = len(outfits) <= int(expectations["max_outfits"])
    if expectations.get("required_item_sets"):
        produced = [set(outfit.item_ids()) for outfit in outfits]
        checks["required_item_sets"] = all(set(ids) in produced for ids in expectations["required_item_sets"])
    if expectations.get("required_reasons"):
        checks["required_reasons"] = any(
            all(reason in outfit.reasons for reason in expectations["required_reasons"]) for outfit in outfits
        )
    if expectations.get("allowed_item_ids"):
        allowed = set(expectations["allowed_item_ids"])
        checks["allowed_item_ids"] = all(set(outfit.item_ids()) <= allowed for outfit in outfits)
    if expectations.get("forbidden_categories"):
        forbidden = set(expectations["forbidden_categories"])
        checks["forbidden_categories"] = not any(
            item.category in forbidden for outfit in outfits for item in outfit.items
        )
    if expectations.get("forbidden_subcategories"):
        forbidden = set(expectations["forbidden_subcategories"])
        checks["forbidden_subcategories"] = not any(
            item.sub_category in forbidden for outfit in outfits for item in outfit.items
        )
    if expectations.get("expected_warnings"):
        text = " ".join(warnings).lower()
        checks["expected_warnings"] = all(word in text for word in expectations["expected_warnings"])
    return {"passed": all(checks.values()), "checks": checks}


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    items: List[ClothingItem] = [from_raw_metadata(raw) for raw in scenario.wardrobe_items]
    outfits = suggest_outfits(
        items,
        occasion=scenario.occasion,
        season=scenario.season,
        max_results=scenario.max_results,
    )
    by_id = {item.item_id: item for item in items}
    warnings = validate_outfit([by_id[item_id] for item_id in scenario.validate_item_ids])
    evaluation = _evaluate_expectations(scenario.expectations, outfits, warnings)
    return {
        "scenario": scenario.name,
        "passed": evaluation["passed"],
        "checks": evaluation["checks"],
        "outfit_count": len(outfits),
        "outfits": [outfit.to_dict() for outfit in outfits],
        "warnings": warnings,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
