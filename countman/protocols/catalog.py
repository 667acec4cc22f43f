"""
Product Resolver Protocol — Interface for barcode/catalog lookup.

Countman defines this protocol, the host catalog implements it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ProductInfo:
    """Product identity resolved from a scanned code."""

    product_id: str
    code: str
    name: str

    def as_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "code": self.code,
            "name": self.name,
        }


@runtime_checkable
class ProductResolver(Protocol):
    """
    Protocol for product resolution.

    Implementations map whatever staff scan (SKU, EAN, internal label)
    to a stable product identity. The identity must not change between
    scans of the same product, since draft rows and stock levels are
    keyed by it.
    """

    def resolve(self, code: str) -> ProductInfo | None:
        """
        Resolve a scanned code.

        Args:
            code: Scanned barcode or SKU

        Returns:
            ProductInfo or None if the code is unknown
        """
        ...
