"""API Routers"""

from api.routers import abv, batches, health

__all__ = ["abv", "batches", "health"]
