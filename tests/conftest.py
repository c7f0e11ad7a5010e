"""Pytest configuration and fixtures."""

import os
from typing import Generator, List

import pytest
from fastapi.testclient import TestClient

from freezebatch.models import Ingredient, VolumeUnit

# Set test environment before importing app
os.environ["DEBUG"] = "true"
os.environ["LOG_LEVEL"] = "DEBUG"


@pytest.fixture
def api_client() -> Generator[TestClient, None, None]:
    """Create a FastAPI test client."""
    from api.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def negroni() -> List[Ingredient]:
    """Gin-forward single-serve Negroni (1.25 : 1 : 1)."""
    return [
        Ingredient(name="Gin", amount=1.25, unit=VolumeUnit.OZ, abv=40, is_base_spirit=True),
        Ingredient(name="Campari", amount=1, unit=VolumeUnit.OZ, abv=25),
        Ingredient(name="Sweet Vermouth", amount=1, unit=VolumeUnit.OZ, abv=16),
    ]


@pytest.fixture
def unflagged_margarita() -> List[Ingredient]:
    """Margarita with no base spirit flagged and the spirit not listed first."""
    return [
        Ingredient(name="Fresh Lime Juice", amount=0.75, unit=VolumeUnit.OZ, abv=0),
        Ingredient(name="Tequila", amount=2, unit=VolumeUnit.OZ, abv=40),
        Ingredient(name="Cointreau", amount=1, unit=VolumeUnit.OZ, abv=40),
    ]
