"""
Single-serving recipes for the freeform calculator.

Ratios are derived from the reference batches where one exists, so the
freeform engine lands close to the verified numbers at the recommended
dilution.
"""

from types import MappingProxyType
from typing import List, Optional

from freezebatch.models.batch import Ingredient
from freezebatch.models.common import VolumeUnit


def _recipe(*rows):
    """Build an immutable recipe. The first row is the base spirit."""
    return tuple(
        Ingredient(name=name, amount=amount, unit=unit, abv=abv, is_base_spirit=(i == 0))
        for i, (name, amount, unit, abv) in enumerate(rows)
    )


OZ = VolumeUnit.OZ

# recipe_id -> tuple of Ingredient
SINGLE_SERVE_RECIPES = MappingProxyType({
    # 750ml gin - 16oz = ~9.4oz gin, + 7oz vermouth + 7oz Campari (~1.3:1:1)
    'negroni': _recipe(
        ('Gin', 1.25, OZ, 40),
        ('Campari', 1, OZ, 25),
        ('Sweet Vermouth', 1, OZ, 16),
    ),
    # 750ml - 10oz = 15.4oz tequila, + 5oz lime + 4oz liqueur + 1.5oz agave
    'margarita': _recipe(
        ('Tequila', 2, OZ, 40),
        ('Fresh Lime Juice', 0.625, OZ, 0),
        ('Orange Liqueur', 0.5, OZ, 40),
        ('Agave Syrup', 0.2, OZ, 0),
    ),
    # Very spirit-forward
    'manhattan': _recipe(
        ('Rye Whiskey', 2.5, OZ, 45),
        ('Sweet Vermouth', 0.5, OZ, 16),
        ('Cherry Syrup', 0.1, OZ, 0),
    ),
    'old-fashioned': _recipe(
        ('Bourbon', 3, OZ, 45),
        ('Agave Syrup', 0.125, OZ, 0),
        ('Angostura Bitters', 2, VolumeUnit.DASH, 45),
    ),
    'dirty-martini': _recipe(
        ('Vodka', 2.4, OZ, 40),
        ('Dry Vermouth', 0.5, OZ, 18),
        ('Olive Brine', 0.2, OZ, 0),
    ),
    'boulevardier': _recipe(
        ('Bourbon', 1.5, OZ, 45),
        ('Campari', 1, OZ, 25),
        ('Sweet Vermouth', 1, OZ, 16),
    ),
    'cosmopolitan': _recipe(
        ('Vodka', 2, OZ, 40),
        ('Orange Liqueur', 0.375, OZ, 40),
        ('Cranberry Concentrate', 0.125, OZ, 0),
        ('Agave Syrup', 0.2, OZ, 0),
        ('Lime Juice', 0.03, OZ, 0),
    ),
    'moscow-mule': _recipe(
        ('Vodka', 2, OZ, 40),
        ('Lime Juice', 0.5, OZ, 0),
        ('Ginger Syrup', 0.5, OZ, 0),
    ),
    'espresso-martini': _recipe(
        ('Vodka', 2, OZ, 40),
        ('Kahlua', 1.125, OZ, 20),
        ('Instant Espresso', 0.5, VolumeUnit.TSP, 0),
    ),
    'paper-plane': _recipe(
        ('Bourbon', 0.75, OZ, 45),
        ('Aperol', 0.75, OZ, 11),
        ('Amaro Nonino', 0.75, OZ, 35),
        ('Lemon Juice', 0.75, OZ, 0),
    ),
    'daiquiri': _recipe(
        ('White Rum', 2.3, OZ, 40),
        ('Fresh Lime Juice', 0.44, OZ, 0),
        ('Agave Syrup', 0.22, OZ, 0),
    ),
    'vesper': _recipe(
        ('Gin', 2, OZ, 40),
        ('Vodka', 0.33, OZ, 40),
        ('Cocchi Americano', 0.625, OZ, 16.5),
    ),
    'mint-julep': _recipe(
        ('Bourbon', 2.75, OZ, 45),
        ('Mint Syrup', 0.375, OZ, 0),
    ),
})


def get_single_serve_recipe(recipe_id: str) -> Optional[List[Ingredient]]:
    """
    Get a single-serving recipe as a new list.

    Ingredients are frozen models, so the caller can rearrange the list
    without touching the table. Returns None if the id is unknown.
    """
    recipe = SINGLE_SERVE_RECIPES.get(recipe_id)
    if recipe is None:
        return None
    return list(recipe)
