"""Ingredient ABV suggestion endpoints."""

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from freezebatch.services import suggest_abv

router = APIRouter()


class ABVSuggestion(BaseModel):
    """Suggested ABV for an ingredient name; abv is None when unknown."""
    name: str
    abv: Optional[float] = None


@router.get("/suggest", response_model=ABVSuggestion)
async def suggest(name: str = Query(..., max_length=200)):
    """Suggest a default ABV for a free-text ingredient name."""
    return ABVSuggestion(name=name, abv=suggest_abv(name))
