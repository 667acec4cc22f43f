"""
Countman Models.

Core models for physical stock counts:
- Location: Where counts are taken
- DraftCount: Provisional per-(product, location) count
- StockLevel: Authoritative per-(product, location) quantity
"""

from countman.models.draft import DraftCount
from countman.models.enums import DraftStatus
from countman.models.location import Location
from countman.models.stock_level import StockLevel

__all__ = [
    'DraftStatus',
    'Location',
    'DraftCount',
    'StockLevel',
]
