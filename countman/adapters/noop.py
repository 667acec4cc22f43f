"""
Noop Product Resolver — Stub adapter for development and testing.

This adapter implements the ProductResolver protocol with trivial defaults:
every scanned code resolves, and the code itself is the product identity.

Usage in settings.py:
    COUNTMAN = {
        "PRODUCT_RESOLVER": "countman.adapters.noop.NoopProductResolver",
    }

WARNING: Do NOT use in production. Typos and unknown barcodes become
new products instead of being rejected.
"""

from __future__ import annotations

from countman.protocols.catalog import ProductInfo


class NoopProductResolver:
    """
    No-operation product resolver.

    Suitable for local development without a catalog and for CI
    pipelines where the catalog service is unavailable.
    """

    def resolve(self, code: str) -> ProductInfo | None:
        """
        Resolve a code. Blank codes are unknown, anything else resolves to itself.

        Args:
            code: Scanned code.

        Returns:
            ProductInfo with product_id=code and name=code, or None for a blank code.
        """
        code = (code or "").strip()
        if not code:
            return None
        return ProductInfo(product_id=code, code=code, name=code)
