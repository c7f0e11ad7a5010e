"""Freeze classification by final ABV."""

from freezebatch.constants import FREEZE_THRESHOLD, SLUSHY_THRESHOLD
from freezebatch.models.common import FreezeAssessment, FreezeStatus
from freezebatch.services.units import round_half_up


def format_abv(abv: float) -> str:
    """Format an ABV percentage to one decimal."""
    return f"{round_half_up(abv, 1):.1f}"


def classify_freeze(abv: float) -> FreezeAssessment:
    """
    Classify how a batch at `abv` percent behaves in the freezer.

    Each threshold belongs to the band above it: 15.0 is slushy and
    22.0 is safe.
    """
    label = format_abv(abv)

    if abv < FREEZE_THRESHOLD:
        return FreezeAssessment(
            status=FreezeStatus.FREEZE,
            message=f"{label}% ABV will freeze solid. Add more spirits or reduce mixers.",
        )
    if abv < SLUSHY_THRESHOLD:
        return FreezeAssessment(
            status=FreezeStatus.SLUSHY,
            message=f"{label}% ABV will be thick/slushy. Still drinkable but not ideal.",
        )
    return FreezeAssessment(
        status=FreezeStatus.SAFE,
        message=f"{label}% ABV will stay perfectly pourable.",
    )
