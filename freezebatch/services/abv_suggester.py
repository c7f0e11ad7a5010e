"""
ABV Suggestion

Guesses a default ABV for a free-text ingredient name to speed up manual
entry. This is a heuristic: callers must let the user override it.

Partial matches scan ABV_DEFAULTS in declaration order and take the first
hit, so the result depends on table order ("ginger beer" hits 'gin'
and comes back as 40). Keep that order stable.
"""

import logging
from typing import Optional

from freezebatch.recipes import ABV_DEFAULTS

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Normalize an ingredient name for lookup."""
    return name.strip().lower()


def suggest_abv(name: Optional[str]) -> Optional[float]:
    """
    Suggest an ABV for an ingredient name.

    Args:
        name: Free-text ingredient name

    Returns:
        Suggested ABV %, or None if nothing matches
    """
    if not name:
        return None

    normalized = normalize_name(name)
    if not normalized:
        return None

    # Direct match
    if normalized in ABV_DEFAULTS:
        return ABV_DEFAULTS[normalized]

    # Partial match, either direction
    for key, abv in ABV_DEFAULTS.items():
        if key in normalized or normalized in key:
            logger.debug(f"ABV suggestion for '{name}' matched '{key}'")
            return abv

    return None
