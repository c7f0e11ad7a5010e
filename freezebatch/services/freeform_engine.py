"""
Freeform Batch Engine

Scales an arbitrary single-serving recipe up to fill a bottle.

The user starts with a FULL bottle of base spirit and needs to know:
1. How much to POUR OFF from that bottle to make room
2. What ingredients to add back (including dilution water)
3. What the final ABV is, and whether the batch stays pourable when frozen

Example: Negroni (1:1:1) for a 750ml bottle with 20% dilution
    water = 750 * 0.20 = 150ml, leaving 600ml for ingredients
    each ingredient = 600 / 3 = 200ml
    pour off = 750 - 200 = 550ml, then add 200ml Campari, 200ml vermouth, 150ml water
"""

import logging
import math
from typing import List, Optional, Sequence

from freezebatch.constants import DEFAULT_DILUTION_PERCENT, STANDARD_BOTTLE_ML
from freezebatch.models.batch import BatchResult, Ingredient, IngredientToAdd
from freezebatch.recipes import get_recommended_dilution, get_single_serve_recipe
from freezebatch.services.freeze import classify_freeze
from freezebatch.services.results import empty_result, servings_for
from freezebatch.services.units import milliliters_to_ounces, round_half_up, to_milliliters

logger = logging.getLogger(__name__)


def find_base_spirit_index(ingredients: Sequence[Ingredient]) -> Optional[int]:
    """
    Find which ingredient is the base spirit.

    The first ingredient flagged as base spirit wins. If none is flagged,
    the highest-ABV ingredient is used (earliest on ties), provided its ABV
    is above zero. Returns None when there is no usable base spirit.
    """
    for i, ing in enumerate(ingredients):
        if ing.is_base_spirit:
            return i

    best_index = None
    best_abv = 0.0
    for i, ing in enumerate(ingredients):
        if ing.abv > best_abv:
            best_index = i
            best_abv = ing.abv

    return best_index


def compute_freeform_batch(
    ingredients: Sequence[Ingredient],
    bottle_volume_ml: float = STANDARD_BOTTLE_ML,
    dilution_percent: float = DEFAULT_DILUTION_PERCENT,
) -> BatchResult:
    """
    Calculate a full bottle batch from a single-serving recipe.

    Args:
        ingredients: Recipe ingredients with amounts, units and ABV
        bottle_volume_ml: Target bottle size
        dilution_percent: Dilution water as % of the bottle

    Returns:
        BatchResult. Incomplete recipes (no ingredients, zero volume, or
        nothing alcoholic to use as base spirit) give the empty result.
    """
    if not ingredients or not 0 < bottle_volume_ml < math.inf:
        return empty_result()

    base_index = find_base_spirit_index(ingredients)
    if base_index is None:
        return empty_result()

    # Convert once, before any scaling
    recipe_ml = [to_milliliters(ing.amount, ing.unit) for ing in ingredients]
    total_recipe_ml = sum(recipe_ml)
    # Overflowing amounts (e.g. 1e308 oz) sum to inf
    if total_recipe_ml <= 0 or not math.isfinite(total_recipe_ml):
        return empty_result()

    water_ml = round_half_up(bottle_volume_ml * dilution_percent / 100)
    volume_for_ingredients = bottle_volume_ml - water_ml

    # One factor for every ingredient keeps the recipe's ratios intact
    scale_factor = volume_for_ingredients / total_recipe_ml
    scaled_ml = [round_half_up(ml * scale_factor) for ml in recipe_ml]

    base_spirit = ingredients[base_index]
    base_in_bottle_ml = scaled_ml[base_index]
    pour_off_ml = bottle_volume_ml - base_in_bottle_ml

    ingredients_to_add: List[IngredientToAdd] = [
        IngredientToAdd(
            name=ing.name,
            amount_ml=ml,
            amount_oz=milliliters_to_ounces(ml),
            abv=ing.abv,
        )
        for i, (ing, ml) in enumerate(zip(ingredients, scaled_ml))
        if i != base_index
    ]

    # Water adds no alcohol
    alcohol_ml = sum(ml * ing.abv / 100 for ing, ml in zip(ingredients, scaled_ml))
    final_abv = round_half_up(alcohol_ml / bottle_volume_ml * 100, 1)
    freeze = classify_freeze(final_abv)

    logger.debug(
        f"Freeform batch: {len(ingredients)} ingredients, {bottle_volume_ml}ml, "
        f"{dilution_percent}% dilution -> pour off {pour_off_ml}ml, {final_abv}% ABV"
    )

    return BatchResult(
        pour_off_ml=pour_off_ml,
        pour_off_oz=milliliters_to_ounces(pour_off_ml),
        ingredients_to_add=ingredients_to_add,
        water_to_add_ml=water_ml,
        water_to_add_oz=milliliters_to_ounces(water_ml),
        final_abv=final_abv,
        total_volume_ml=bottle_volume_ml,
        total_volume_oz=milliliters_to_ounces(bottle_volume_ml),
        servings=servings_for(bottle_volume_ml),
        freeze_status=freeze.status,
        freeze_message=freeze.message,
        base_spirit_name=base_spirit.name,
        base_spirit_in_bottle_ml=base_in_bottle_ml,
        base_spirit_in_bottle_oz=milliliters_to_ounces(base_in_bottle_ml),
    )


def compute_preset_batch(
    recipe_id: str,
    bottle_volume_ml: float = STANDARD_BOTTLE_ML,
    dilution_percent: Optional[float] = None,
) -> Optional[BatchResult]:
    """
    Run the freeform engine on a built-in single-serving recipe.

    Uses the recipe's recommended dilution unless one is given.
    Returns None if the recipe id is unknown.
    """
    recipe = get_single_serve_recipe(recipe_id)
    if recipe is None:
        logger.info(f"Unknown preset recipe: {recipe_id}")
        return None

    if dilution_percent is None:
        dilution_percent = get_recommended_dilution(recipe_id)

    return compute_freeform_batch(recipe, bottle_volume_ml, dilution_percent)
