"""
Countman Protocols.

Defines interfaces for external system integration.
"""

from countman.protocols.catalog import (
    ProductInfo,
    ProductResolver,
)
from countman.protocols.locations import LocationDirectory

__all__ = [
    "LocationDirectory",
    "ProductInfo",
    "ProductResolver",
]
