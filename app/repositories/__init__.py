"""
app/repositories package marker.
"""

from app.repositories.artwork_sale_repository import ArtworkSaleRepository
from app.repositories.inflation_index_repository import InflationIndexRepository

__all__ = [
    "ArtworkSaleRepository",
    "InflationIndexRepository",
]
