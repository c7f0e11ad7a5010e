# freezebatch/recipes/abv_defaults.py
# Typical ABV (%) by lowercase ingredient name.
# Declaration order matters: partial-name suggestions take the first hit.

from types import MappingProxyType

ABV_DEFAULTS = MappingProxyType({
    # Spirits
    'vodka': 40,
    'gin': 40,
    'bourbon': 45,
    'rye': 45,
    'rye whiskey': 45,
    'whiskey': 40,
    'scotch': 43,
    'rum': 40,
    'white rum': 40,
    'dark rum': 40,
    'tequila': 40,
    'mezcal': 43,
    'brandy': 40,
    'cognac': 40,

    # Liqueurs
    'cointreau': 40,
    'triple sec': 30,
    'grand marnier': 40,
    'campari': 25,
    'aperol': 11,
    'kahlua': 20,
    'amaretto': 28,
    'st germain': 20,
    'maraschino': 32,
    'amaro': 30,
    'amaro nonino': 35,
    'fernet': 39,

    # Fortified
    'sweet vermouth': 16,
    'dry vermouth': 18,

    # Bitters (high ABV but used in dashes)
    'angostura': 45,
    'angostura bitters': 45,
    'bitters': 45,

    # Mixers
    'lime juice': 0,
    'lemon juice': 0,
    'orange juice': 0,
    'cranberry juice': 0,
    'simple syrup': 0,
    'honey syrup': 0,
    'ginger syrup': 0,
    'olive brine': 0,
    'water': 0,
    'cold brew': 0,
    'cold brew concentrate': 0,
    'espresso': 0,
})
