"""Data models for freezebatch."""

from freezebatch.models.batch import (
    AddBackIngredient,
    BatchResult,
    BlendComponent,
    BlendSummary,
    Ingredient,
    IngredientToAdd,
    ReferenceBatch,
)
from freezebatch.models.common import FreezeAssessment, FreezeStatus, VolumeUnit

__all__ = [
    # Common
    "VolumeUnit",
    "FreezeStatus",
    "FreezeAssessment",
    # Recipes
    "Ingredient",
    "AddBackIngredient",
    "ReferenceBatch",
    # Results
    "IngredientToAdd",
    "BatchResult",
    "BlendComponent",
    "BlendSummary",
]
