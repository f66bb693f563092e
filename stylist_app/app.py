"""Service bootstrap wiring request payloads to the outfit engine."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple

from pydantic import ValidationError

from logic.outfit_builder import group_by_category
from logic.seasonal_fit import season_for_temperature
from logic.suggestion_engine import suggest_outfits, suggestion_rating, validate_outfit
from logic.validation import (
    ClothingItemPayload,
    SuggestRequest,
    SuggestResponse,
    SuggestionPayload,
    ValidateOutfitRequest,
    validation_failure,
)
from models.clothing_item import ClothingItem
from stylist_app.config import StylistConfig
from stylist_app.logging_config import configure_logging, get_logger, log_event, operation_context
from stylist_app.observability import instrument_operation

LOGGER = get_logger(__name__)


def _on_invalid_request(exc: ValidationError) -> Dict[str, Any]:
    return validation_failure("Request payload failed validation", exc)


class WardrobeStylistApp:
    """Facade the UI layer and the HTTP server call into."""

    def __init__(self, config: StylistConfig | None = None) -> None:
        self.config = config or StylistConfig.from_env()
        configure_logging(self.config.log_level, self.config.service_name)

    def _coerce_items(self, payloads: Sequence[ClothingItemPayload]) -> Tuple[List[ClothingItem], List[str]]:
        items: List[ClothingItem] = []
        skipped: List[str] = []
        for payload in payloads:
            try:
                items.append(payload.to_item())
            except ValueError as exc:
                skipped.append(payload.item_id)
                LOGGER.warning("Skipping clothing item due to validation error: %s", exc)
        return items, skipped

    def _cap_pool(self, items: List[ClothingItem]) -> List[ClothingItem]:
        """Keep at most ``max_items_per_category`` items of each category, in input order."""

        limit = self.config.max_items_per_category
        grouped = group_by_category(items)
        if all(len(bucket) <= limit for bucket in grouped.values()):
            return items
        kept_ids = {item.item_id for bucket in grouped.values() for item in bucket[:limit]}
        capped = [item for item in items if item.item_id in kept_ids]
        LOGGER.info("Capped item pool from %s to %s items", len(items), len(capped))
        return capped

    def _resolve_max_results(self, requested: int | None) -> int:
        if requested is None:
            return self.config.default_max_results
        return min(requested, self.config.max_results_cap)

    @instrument_operation("suggest_outfits", input_model=SuggestRequest, on_validation_error=_on_invalid_request)
    def suggest(self, request: SuggestRequest) -> Dict[str, Any]:
        """Return ranked outfit suggestions for a snapshot of wardrobe items."""

        with operation_context("stylist.suggest") as correlation_id:
            items, skipped = self._coerce_items(request.items)
            items = self._cap_pool(items)
            season = request.season
            if season is None and request.temperature is not None:
                season = season_for_temperature(request.temperature)

            results = suggest_outfits(
                items,
                occasion=request.occasion,
                season=season,
                max_results=self._resolve_max_results(request.max_results),
            )
            suggestions = [
                SuggestionPayload(
                    items=result.to_dict()["items"],
                    item_ids=result.item_ids(),
                    score=round(result.score, 2),
                    rating=suggestion_rating(result.score),
                    reasons=result.reasons,
                )
                for result in results
            ]
            log_event(
                LOGGER,
                logging.INFO,
                "suggestions_ranked",
                correlation_id=correlation_id,
                pool_size=len(items),
                skipped=len(skipped),
                season=season,
                occasion=request.occasion,
                suggestion_count=len(suggestions),
            )
            response = SuggestResponse(
                suggestions=suggestions,
                count=len(suggestions),
                season=season,
                skipped_items=skipped,
            )
            return response.model_dump(by_alias=True)

    @instrument_operation("validate_outfit", input_model=ValidateOutfitRequest, on_validation_error=_on_invalid_request)
    def validate(self, request: ValidateOutfitRequest) -> Dict[str, Any]:
        """Return styling warnings for a manually assembled outfit."""

        items, skipped = self._coerce_items(request.items)
        warnings = validate_outfit(items)
        return {"status": "ok", "warnings": warnings, "valid": not warnings, "skippedItems": skipped}


__all__ = ["WardrobeStylistApp"]
