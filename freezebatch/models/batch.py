"""
Batch Data Models

Recipe inputs, reference batch records, and the BatchResult returned by
both batch engines.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from freezebatch.models.common import FreezeStatus, VolumeUnit


# ============================================================================
# Recipe Inputs
# ============================================================================

class Ingredient(BaseModel):
    """One component of a single-serving recipe."""

    model_config = ConfigDict(frozen=True)

    name: str
    amount: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Single-serving amount in `unit`"
    )
    unit: VolumeUnit = VolumeUnit.ML
    abv: float = Field(
        default=0.0, ge=0, le=100, allow_inf_nan=False, description="Alcohol by volume, %"
    )
    is_base_spirit: bool = False


class AddBackIngredient(BaseModel):
    """An ingredient added back after the pour-off, measured in oz."""

    model_config = ConfigDict(frozen=True)

    name: str
    oz: float = Field(..., ge=0, allow_inf_nan=False)
    abv: float = Field(default=0.0, ge=0, le=100, allow_inf_nan=False)


class ReferenceBatch(BaseModel):
    """
    Verified batch measurements for a standard 750ml bottle.

    Base spirit left in the bottle plus add-backs plus water fills the
    bottle; this is true of the table data and is not validated.
    """

    model_config = ConfigDict(frozen=True)

    base_spirit: str
    base_spirit_abv: float = Field(..., ge=0, le=100)
    pour_off_oz: float = Field(..., ge=0)
    add_back: Tuple[AddBackIngredient, ...]
    water_oz: float = Field(default=0.0, ge=0)
    extras: Optional[str] = Field(
        default=None,
        description="Bitters, salt or garnish not counted in the volumes"
    )


# ============================================================================
# Results
# ============================================================================

class IngredientToAdd(BaseModel):
    """A scaled ingredient to pour into the bottle."""

    name: str
    amount_ml: float
    amount_oz: float
    abv: float


class BatchResult(BaseModel):
    """Everything needed to turn a full bottle into a freezer batch."""

    # What to pour off from the base spirit bottle
    pour_off_ml: float = 0
    pour_off_oz: float = 0

    # What to add to the bottle
    ingredients_to_add: List[IngredientToAdd] = Field(default_factory=list)
    water_to_add_ml: float = 0
    water_to_add_oz: float = 0

    # Final stats
    final_abv: float = Field(default=0.0, description="Rounded to 1 decimal")
    total_volume_ml: float = 0
    total_volume_oz: float = 0
    servings: int = 0

    # Freeze status
    freeze_status: FreezeStatus = FreezeStatus.FREEZE
    freeze_message: str = ""

    # Base spirit info
    base_spirit_name: str = ""
    base_spirit_in_bottle_ml: float = 0
    base_spirit_in_bottle_oz: float = 0

    notes: Optional[str] = None


class BlendComponent(BaseModel):
    """A measured volume going into a blend."""

    name: str = ""
    volume_ml: float = Field(..., ge=0, allow_inf_nan=False)
    abv: float = Field(default=0.0, ge=0, le=100, allow_inf_nan=False)


class BlendSummary(BaseModel):
    """ABV and yield of a list of already-measured volumes."""

    final_abv: float = 0.0
    total_volume_ml: float = 0
    total_volume_oz: float = 0
    freeze_status: FreezeStatus = FreezeStatus.FREEZE
    freeze_message: str = ""
    servings: int = 0
