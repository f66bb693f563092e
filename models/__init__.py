"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.clothing_item import ClothingItem, from_raw_metadata
from models.outfit import SuggestionResult

__all__ = ["ClothingItem", "SuggestionResult", "from_raw_metadata"]
