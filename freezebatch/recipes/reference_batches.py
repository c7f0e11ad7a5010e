"""
Reference batch recipes.

Exact pour-off and add-back measurements for a full 750ml bottle, taken from
the Milk Street freezer cocktail method. At 750ml these are reproduced as-is;
other bottle sizes are scaled from them.
"""

from types import MappingProxyType
from typing import List, Optional

from freezebatch.models.batch import AddBackIngredient, ReferenceBatch


def _batch(base_spirit, base_spirit_abv, pour_off_oz, add_back, water_oz=0.0, extras=None):
    return ReferenceBatch(
        base_spirit=base_spirit,
        base_spirit_abv=base_spirit_abv,
        pour_off_oz=pour_off_oz,
        add_back=tuple(AddBackIngredient(name=n, oz=oz, abv=abv) for n, oz, abv in add_back),
        water_oz=water_oz,
        extras=extras,
    )


# recipe_id -> ReferenceBatch (declaration order is display order)
REFERENCE_BATCHES = MappingProxyType({
    'margarita': _batch(
        'Tequila Blanco', 40, 10,
        [
            ('Fresh Lime Juice', 5, 0),
            ('Orange Liqueur (Cointreau)', 4, 40),
            ('Agave Syrup', 1.5, 0),
        ],
        extras='Pinch of salt',
    ),
    'negroni': _batch(
        'Gin', 40, 16,
        [
            ('Sweet Vermouth', 7, 16),
            ('Campari', 7, 25),
        ],
        extras='Few dashes orange bitters',
    ),
    'manhattan': _batch(
        'Rye Whiskey', 45, 4.5,
        [
            ('Sweet Vermouth', 4, 16),
            ('Maraschino Cherry Syrup', 0.5, 0),
        ],
        extras='Dash or two Angostura bitters',
    ),
    'old-fashioned': _batch(
        'Bourbon', 45, 1.33,
        [
            ('Agave/Simple Syrup', 1, 0),
        ],
        extras='½ tbsp Angostura bitters',
    ),
    'daiquiri': _batch(
        'White Rum', 40, 7,
        [
            ('Fresh Lime Juice', 3.5, 0),
            ('Agave/Simple Syrup', 1.75, 0),
        ],
        water_oz=2,
        extras="Dash or two Peychaud's bitters",
    ),
    'dirty-martini': _batch(
        'Vodka', 40, 6,
        [
            ('Dry Vermouth', 4, 18),
            ('Green Olive Brine', 1.5, 0),
        ],
        water_oz=2.5,
    ),
    'cosmopolitan': _batch(
        'Vodka', 40, 9,
        [
            ('Orange Liqueur (Cointreau)', 3, 40),
            ('Agave/Simple Syrup', 1.5, 0),
            ('Cranberry Juice Concentrate', 1, 0),
            ('Fresh Lime Juice', 0.25, 0),
        ],
        water_oz=2,
        extras='½ tsp orange bitters',
    ),
    'espresso-martini': _batch(
        'Vodka', 40, 10,
        [
            ('Kahlúa', 9, 20),
        ],
        water_oz=1,
        extras='3½ tbsp instant espresso powder',
    ),
    'vesper': _batch(
        'Gin', 40, 10,
        [
            ('Vodka', 2.5, 40),
            ('Cocchi Americano', 5, 16.5),
        ],
    ),
    'mint-julep': _batch(
        'Bourbon', 45, 3.25,
        [
            ('Mint Syrup', 3, 0),
        ],
        extras='Mint syrup: 2 cups fresh mint + ½ cup sugar + water',
    ),
    'paper-plane': _batch(
        'Bourbon', 45, 19,
        [
            ('Aperol', 6.25, 11),
            ('Amaro Nonino', 6.25, 35),
            ('Fresh Lemon Juice', 6.25, 0),
        ],
        extras='Equal parts cocktail - will be slushy due to ~20% ABV',
    ),
    'moscow-mule': _batch(
        'Vodka', 40, 6.5,
        [
            ('Fresh Lime Juice', 3.25, 0),
            ('Ginger Syrup', 3.25, 0),
        ],
        extras='Add 2oz ginger beer per drink when serving (do NOT batch the ginger beer)',
    ),
    'boulevardier': _batch(
        'Bourbon', 45, 14,
        [
            ('Sweet Vermouth', 6, 16),
            ('Campari', 6, 25),
        ],
        extras='Few dashes orange bitters',
    ),
})


def get_reference_batch(recipe_id: str) -> Optional[ReferenceBatch]:
    """Look up a reference batch by id. Returns None if unknown."""
    return REFERENCE_BATCHES.get(recipe_id)


def list_reference_recipes() -> List[str]:
    """Get all reference recipe ids in display order."""
    return list(REFERENCE_BATCHES.keys())
