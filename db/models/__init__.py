"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.artist import Artist
from db.models.artwork_sale import ArtworkSale
from db.models.inflation_index import InflationIndex

__all__ = [
    "Artist",
    "ArtworkSale",
    "InflationIndex",
]
