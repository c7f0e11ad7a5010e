"""
Batch Calculator Services

Pure functions with no framework dependencies.
All services are stateless and never modify their inputs.
"""

from freezebatch.services.abv_suggester import suggest_abv
from freezebatch.services.blend import blend_summary
from freezebatch.services.freeform_engine import (
    compute_freeform_batch,
    compute_preset_batch,
    find_base_spirit_index,
)
from freezebatch.services.freeze import classify_freeze
from freezebatch.services.reference_engine import compute_reference_batch
from freezebatch.services.results import empty_result
from freezebatch.services.units import (
    milliliters_to_ounces,
    ounces_to_milliliters,
    round_to_quarter,
    to_milliliters,
)

__all__ = [
    "to_milliliters",
    "milliliters_to_ounces",
    "ounces_to_milliliters",
    "round_to_quarter",
    "classify_freeze",
    "compute_freeform_batch",
    "compute_preset_batch",
    "find_base_spirit_index",
    "compute_reference_batch",
    "empty_result",
    "suggest_abv",
    "blend_summary",
]
