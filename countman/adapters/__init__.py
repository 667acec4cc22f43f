"""
Countman Adapters.

Implementations of protocols for external systems.
"""

from countman.adapters.catalog import get_product_resolver, reset_product_resolver
from countman.adapters.locations import (
    ModelLocationDirectory,
    get_location_directory,
    reset_location_directory,
)


def reset_adapters() -> None:
    """Drop every cached adapter instance."""
    reset_product_resolver()
    reset_location_directory()


__all__ = [
    "ModelLocationDirectory",
    "get_location_directory",
    "get_product_resolver",
    "reset_adapters",
    "reset_location_directory",
    "reset_product_resolver",
]
