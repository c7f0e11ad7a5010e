"""
Unit Conversion

Converts recipe amounts to milliliters (the unit all calculations run in)
and back to ounces for display. Every rounding in the package goes through
round_half_up so halves always round away from zero.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from freezebatch.constants import ML_PER_OZ, QUARTER_OZ_STEPS
from freezebatch.models.common import VolumeUnit

logger = logging.getLogger(__name__)


# Volume conversions to milliliters
UNIT_TO_ML: dict[VolumeUnit, float] = {
    VolumeUnit.ML: 1.0,
    VolumeUnit.OZ: ML_PER_OZ,
    VolumeUnit.CL: 10.0,
    VolumeUnit.DASH: 0.9,
    VolumeUnit.BARSPOON: 5.0,
    VolumeUnit.TSP: 5.0,
    VolumeUnit.TBSP: 15.0,
}

# Used when no unit is given, or the unit is not in UNIT_TO_ML
FALLBACK_FACTOR = 1.0


def round_half_up(value: float, places: int = 0) -> float:
    """Round to `places` decimals with halves going away from zero."""
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def round_to_quarter(oz: float) -> float:
    """
    Round to clean, practical measurements for bartending.

    Uses 0.25 oz increments (standard jigger markings).
    """
    return round_half_up(oz * QUARTER_OZ_STEPS) / QUARTER_OZ_STEPS


def unit_factor(unit: Optional[Union[VolumeUnit, str]]) -> float:
    """
    Get the ml multiplier for a unit.

    Accepts a VolumeUnit or its string value (any case). A missing or
    unrecognized unit is treated as milliliters.
    """
    if unit is None:
        return FALLBACK_FACTOR

    if not isinstance(unit, VolumeUnit):
        try:
            unit = VolumeUnit(str(unit).strip().lower())
        except ValueError:
            logger.warning(f"Unknown unit '{unit}', treating amount as ml")
            return FALLBACK_FACTOR

    return UNIT_TO_ML[unit]


def to_milliliters(amount: float, unit: Optional[Union[VolumeUnit, str]]) -> float:
    """Convert an amount in `unit` to milliliters."""
    return amount * unit_factor(unit)


def milliliters_to_ounces(ml: float) -> float:
    """Convert ml to oz, rounded to 2 decimals."""
    return round_half_up(ml / ML_PER_OZ, 2)


def ounces_to_milliliters(oz: float) -> int:
    """Convert oz to ml, rounded to the nearest whole ml."""
    return int(round_half_up(oz * ML_PER_OZ))
