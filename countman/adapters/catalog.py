"""
Countman Catalog Adapter — product resolution via the host catalog.

This adapter loads the configured ProductResolver from settings.

Usage:
    from countman.adapters import get_product_resolver

    resolver = get_product_resolver()
    product = resolver.resolve("7891234567890")

Settings:
    COUNTMAN = {
        "PRODUCT_RESOLVER": "catalog.adapters.SkuProductResolver",
    }

If PRODUCT_RESOLVER is not configured, get_product_resolver() raises ImproperlyConfigured.
"""

from __future__ import annotations

import logging
import threading

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from countman.conf import countman_settings
from countman.protocols.catalog import ProductResolver

logger = logging.getLogger(__name__)


# Cached resolver instance
_lock = threading.Lock()
_product_resolver: ProductResolver | None = None


def load_adapter(path: str, setting: str):
    """
    Import and instantiate an adapter class from a dotted path.

    Raises:
        ImproperlyConfigured: If path is empty or import fails
    """
    if not path:
        raise ImproperlyConfigured(
            f"COUNTMAN['{setting}'] must be configured."
        )
    try:
        adapter_class = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Failed to import {setting} '{path}': {e}"
        ) from e
    logger.debug("Loaded %s: %s", setting, path)
    return adapter_class()


def get_product_resolver() -> ProductResolver:
    """
    Return the configured product resolver.

    Raises:
        ImproperlyConfigured: If PRODUCT_RESOLVER is not configured or import fails
    """
    global _product_resolver

    if _product_resolver is None:
        with _lock:
            if _product_resolver is None:  # double-checked
                _product_resolver = load_adapter(
                    countman_settings.PRODUCT_RESOLVER, "PRODUCT_RESOLVER"
                )

    return _product_resolver


def reset_product_resolver() -> None:
    """Reset the cached resolver. Useful for testing."""
    global _product_resolver
    _product_resolver = None
