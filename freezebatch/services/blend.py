"""
Blend Summary

ABV and yield of volumes that have already been measured out, e.g. a
batch mixed by hand. No pour-off or scaling is involved.
"""

import math
from typing import Sequence

from freezebatch.models.batch import BlendComponent, BlendSummary
from freezebatch.services.freeze import classify_freeze
from freezebatch.services.results import EMPTY_MESSAGE, servings_for
from freezebatch.services.units import milliliters_to_ounces, round_half_up


def blend_summary(components: Sequence[BlendComponent]) -> BlendSummary:
    """Compute the volume-weighted ABV and servings of a blend."""
    if not components:
        return BlendSummary(freeze_message=EMPTY_MESSAGE)

    total_ml = sum(c.volume_ml for c in components)
    if not math.isfinite(total_ml):
        return BlendSummary(freeze_message=EMPTY_MESSAGE)

    alcohol_ml = sum(c.volume_ml * (c.abv / 100) for c in components)
    final_abv = round_half_up(alcohol_ml / total_ml * 100, 1) if total_ml > 0 else 0.0
    freeze = classify_freeze(final_abv)

    return BlendSummary(
        final_abv=final_abv,
        total_volume_ml=round_half_up(total_ml),
        total_volume_oz=milliliters_to_ounces(total_ml),
        freeze_status=freeze.status,
        freeze_message=freeze.message,
        servings=servings_for(total_ml),
    )
