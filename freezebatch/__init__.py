"""
freezebatch Core Package

Pure calculation logic for freezer batch cocktails: how much spirit to pour
off a full bottle, what to add back, and whether the result stays pourable.
No framework dependencies (FastAPI) in this package.
"""

__version__ = "1.0.0"

from freezebatch.constants import (
    FREEZE_THRESHOLD,
    ML_PER_OZ,
    SERVING_SIZE_ML,
    SLUSHY_THRESHOLD,
    STANDARD_BOTTLE_ML,
)
from freezebatch.models import BatchResult, FreezeStatus, Ingredient, ReferenceBatch, VolumeUnit
from freezebatch.services import (
    classify_freeze,
    compute_freeform_batch,
    compute_reference_batch,
    suggest_abv,
)

__all__ = [
    "ML_PER_OZ",
    "STANDARD_BOTTLE_ML",
    "SERVING_SIZE_ML",
    "FREEZE_THRESHOLD",
    "SLUSHY_THRESHOLD",
    "VolumeUnit",
    "FreezeStatus",
    "Ingredient",
    "ReferenceBatch",
    "BatchResult",
    "compute_freeform_batch",
    "compute_reference_batch",
    "classify_freeze",
    "suggest_abv",
]
