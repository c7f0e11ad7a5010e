"""Closed recipe and ingredient data tables."""

from freezebatch.recipes.abv_defaults import ABV_DEFAULTS
from freezebatch.recipes.dilution import DILUTION_RECOMMENDATIONS, get_recommended_dilution
from freezebatch.recipes.reference_batches import (
    REFERENCE_BATCHES,
    get_reference_batch,
    list_reference_recipes,
)
from freezebatch.recipes.single_serve import SINGLE_SERVE_RECIPES, get_single_serve_recipe

__all__ = [
    "REFERENCE_BATCHES",
    "SINGLE_SERVE_RECIPES",
    "DILUTION_RECOMMENDATIONS",
    "ABV_DEFAULTS",
    "get_reference_batch",
    "list_reference_recipes",
    "get_single_serve_recipe",
    "get_recommended_dilution",
]
