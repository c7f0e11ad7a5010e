"""Shared pieces of BatchResult construction."""

from freezebatch.constants import SERVING_SIZE_ML
from freezebatch.models.batch import BatchResult
from freezebatch.models.common import FreezeStatus

EMPTY_MESSAGE = "Add ingredients to calculate"


def empty_result() -> BatchResult:
    """The all-zero result shown while the recipe is incomplete."""
    return BatchResult(
        freeze_status=FreezeStatus.FREEZE,
        freeze_message=EMPTY_MESSAGE,
        base_spirit_name="",
    )


def servings_for(volume_ml: float) -> int:
    """Number of ~3oz servings in a volume."""
    return int(volume_ml // SERVING_SIZE_ML)
