"""Common types used across the batch calculator."""

from enum import Enum

from pydantic import BaseModel

# ============================================================================
# Enums
# ============================================================================

class VolumeUnit(str, Enum):
    """Volume units accepted for recipe amounts."""
    ML = "ml"
    OZ = "oz"
    CL = "cl"
    DASH = "dash"
    BARSPOON = "barspoon"
    TSP = "tsp"
    TBSP = "tbsp"


class FreezeStatus(str, Enum):
    """How a batch behaves at freezer temperature."""
    FREEZE = "freeze"
    SLUSHY = "slushy"
    SAFE = "safe"


# ============================================================================
# Common Value Objects
# ============================================================================

class FreezeAssessment(BaseModel):
    """Freeze classification with a human-readable message."""
    status: FreezeStatus
    message: str
