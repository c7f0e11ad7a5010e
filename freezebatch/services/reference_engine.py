"""
Reference Batch Engine

Reproduces the verified reference batches exactly at 750ml and scales
them linearly to other bottle sizes. Scaled amounts are rounded to
quarter ounces so they can be measured with a jigger.
"""

import logging
import math
from typing import Optional

from freezebatch.constants import ML_PER_OZ, STANDARD_BOTTLE_ML
from freezebatch.models.batch import BatchResult, IngredientToAdd
from freezebatch.recipes import get_reference_batch
from freezebatch.services.freeze import classify_freeze
from freezebatch.services.results import empty_result, servings_for
from freezebatch.services.units import (
    milliliters_to_ounces,
    ounces_to_milliliters,
    round_half_up,
    round_to_quarter,
)

logger = logging.getLogger(__name__)


def compute_reference_batch(
    recipe_id: str,
    bottle_volume_ml: float = STANDARD_BOTTLE_ML,
) -> Optional[BatchResult]:
    """
    Calculate a batch from the reference table.

    Args:
        recipe_id: Key in REFERENCE_BATCHES (e.g. 'margarita')
        bottle_volume_ml: Target bottle size

    Returns:
        BatchResult with oz amounts in quarter-ounce steps, or None if the
        recipe id is unknown.
    """
    recipe = get_reference_batch(recipe_id)
    if recipe is None:
        logger.info(f"Unknown reference recipe: {recipe_id}")
        return None

    if not 0 < bottle_volume_ml < math.inf:
        return empty_result()

    scale_factor = bottle_volume_ml / STANDARD_BOTTLE_ML

    pour_off_oz = round_to_quarter(recipe.pour_off_oz * scale_factor)

    # Base spirit remaining in bottle (bottle size minus pour-off)
    bottle_oz = round_to_quarter(bottle_volume_ml / ML_PER_OZ)
    base_spirit_oz = bottle_oz - pour_off_oz
    base_spirit_ml = ounces_to_milliliters(base_spirit_oz)

    ingredients_to_add = []
    for ing in recipe.add_back:
        scaled_oz = round_to_quarter(ing.oz * scale_factor)
        ingredients_to_add.append(IngredientToAdd(
            name=ing.name,
            amount_ml=ounces_to_milliliters(scaled_oz),
            amount_oz=scaled_oz,
            abv=ing.abv,
        ))

    water_oz = round_to_quarter(recipe.water_oz * scale_factor)

    alcohol_ml = base_spirit_ml * recipe.base_spirit_abv / 100
    alcohol_ml += sum(ing.amount_ml * ing.abv / 100 for ing in ingredients_to_add)
    final_abv = round_half_up(alcohol_ml / bottle_volume_ml * 100, 1)
    freeze = classify_freeze(final_abv)

    logger.debug(
        f"Reference batch '{recipe_id}' at {bottle_volume_ml}ml: "
        f"pour off {pour_off_oz}oz, {final_abv}% ABV"
    )

    return BatchResult(
        pour_off_ml=ounces_to_milliliters(pour_off_oz),
        pour_off_oz=pour_off_oz,
        ingredients_to_add=ingredients_to_add,
        water_to_add_ml=ounces_to_milliliters(water_oz),
        water_to_add_oz=water_oz,
        final_abv=final_abv,
        total_volume_ml=bottle_volume_ml,
        total_volume_oz=milliliters_to_ounces(bottle_volume_ml),
        servings=servings_for(bottle_volume_ml),
        freeze_status=freeze.status,
        freeze_message=freeze.message,
        base_spirit_name=recipe.base_spirit,
        base_spirit_in_bottle_ml=base_spirit_ml,
        base_spirit_in_bottle_oz=base_spirit_oz,
        notes=recipe.extras,
    )
