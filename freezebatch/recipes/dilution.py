# freezebatch/recipes/dilution.py
# Recommended dilution water (% of bottle) per recipe.
# Freezer temperature smooths the alcohol, so these run much lower than
# bar dilution from ice.

from types import MappingProxyType

from freezebatch.constants import DEFAULT_DILUTION_PERCENT

DILUTION_RECOMMENDATIONS = MappingProxyType({
    # Spirit-forward stirred drinks: no water
    'negroni': 0,
    'manhattan': 0,
    'old-fashioned': 0,
    'boulevardier': 0,
    'vesper': 0,
    'mint-julep': 0,

    # Martinis: small amount of water
    'dirty-martini': 10,

    # Citrus drinks: lime provides the liquid
    'margarita': 0,
    'daiquiri': 8,
    'cosmopolitan': 8,
    'paper-plane': 0,

    # Coffee drinks
    'espresso-martini': 4,

    # Carbonated (ginger beer added at serve)
    'moscow-mule': 0,
})


def get_recommended_dilution(recipe_id: str, default: float = DEFAULT_DILUTION_PERCENT) -> float:
    """Get the recommended dilution % for a recipe, or `default` if unknown."""
    return DILUTION_RECOMMENDATIONS.get(recipe_id, default)
