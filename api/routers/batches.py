"""Batch calculation endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel, Field

from api.config import Settings, get_settings
from api.middleware.errors import NotFoundError, ValidationError
from freezebatch.models.batch import BatchResult, BlendComponent, BlendSummary, Ingredient
from freezebatch.recipes import (
    REFERENCE_BATCHES,
    SINGLE_SERVE_RECIPES,
    get_recommended_dilution,
    list_reference_recipes,
)
from freezebatch.services import (
    blend_summary,
    compute_freeform_batch,
    compute_preset_batch,
    compute_reference_batch,
)

router = APIRouter()


# =============================================================================
# Request / Response Models
# =============================================================================

class FreeformBatchRequest(BaseModel):
    """A single-serving recipe to scale into a bottle."""
    ingredients: List[Ingredient] = Field(default_factory=list)
    bottle_volume_ml: Optional[float] = Field(default=None, gt=0)
    dilution_percent: Optional[float] = Field(default=None, ge=0, lt=100)


class BlendRequest(BaseModel):
    """Already-measured volumes to summarize."""
    components: List[BlendComponent] = Field(default_factory=list)


class ReferenceRecipeSummary(BaseModel):
    """Listing entry for a reference recipe."""
    recipe_id: str
    base_spirit: str
    base_spirit_abv: float
    add_back: List[str]
    recommended_dilution_percent: float
    extras: Optional[str] = None


def _resolve_bottle(bottle_volume_ml: Optional[float], settings: Settings) -> float:
    """Apply the default bottle size and enforce the configured maximum."""
    if bottle_volume_ml is None:
        return settings.default_bottle_ml
    if bottle_volume_ml > settings.max_bottle_ml:
        raise ValidationError(
            f"Bottle size must be at most {settings.max_bottle_ml:g}ml",
            details={"bottle_volume_ml": bottle_volume_ml},
        )
    return bottle_volume_ml


# =============================================================================
# Endpoints
# =============================================================================

@router.post("/freeform", response_model=BatchResult)
async def freeform_batch(
    request: FreeformBatchRequest = Body(...),
    settings: Settings = Depends(get_settings),
):
    """
    Scale a single-serving recipe to fill a bottle.

    Incomplete recipes return the all-zero result rather than an error.
    """
    bottle_ml = _resolve_bottle(request.bottle_volume_ml, settings)
    dilution = (
        request.dilution_percent
        if request.dilution_percent is not None
        else settings.default_dilution_percent
    )
    return compute_freeform_batch(request.ingredients, bottle_ml, dilution)


@router.get("/reference", response_model=List[ReferenceRecipeSummary])
async def list_reference_batches():
    """List the reference recipes in display order."""
    return [
        ReferenceRecipeSummary(
            recipe_id=recipe_id,
            base_spirit=batch.base_spirit,
            base_spirit_abv=batch.base_spirit_abv,
            add_back=[ing.name for ing in batch.add_back],
            recommended_dilution_percent=get_recommended_dilution(recipe_id),
            extras=batch.extras,
        )
        for recipe_id, batch in REFERENCE_BATCHES.items()
    ]


@router.get("/reference/{recipe_id}", response_model=BatchResult)
async def reference_batch(
    recipe_id: str,
    bottle_volume_ml: Optional[float] = Query(None, gt=0),
    settings: Settings = Depends(get_settings),
):
    """Reference batch scaled to a bottle size, in quarter-ounce steps."""
    bottle_ml = _resolve_bottle(bottle_volume_ml, settings)
    result = compute_reference_batch(recipe_id, bottle_ml)
    if result is None:
        raise NotFoundError("Reference recipe", recipe_id, valid_ids=list_reference_recipes())
    return result


@router.get("/presets/{recipe_id}", response_model=BatchResult)
async def preset_batch(
    recipe_id: str,
    bottle_volume_ml: Optional[float] = Query(None, gt=0),
    dilution_percent: Optional[float] = Query(None, ge=0, lt=100),
    settings: Settings = Depends(get_settings),
):
    """
    Built-in single-serving recipe run through the freeform engine.

    Uses the recipe's recommended dilution unless one is given.
    """
    bottle_ml = _resolve_bottle(bottle_volume_ml, settings)
    result = compute_preset_batch(recipe_id, bottle_ml, dilution_percent)
    if result is None:
        raise NotFoundError("Preset recipe", recipe_id, valid_ids=list(SINGLE_SERVE_RECIPES))
    return result


@router.post("/blend", response_model=BlendSummary)
async def blend(request: BlendRequest = Body(...)):
    """ABV and servings for already-measured volumes."""
    return blend_summary(request.components)
