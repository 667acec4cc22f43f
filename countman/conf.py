"""
Countman configuration.

Usage in settings.py:
    COUNTMAN = {
        "PRODUCT_RESOLVER": "catalog.adapters.SkuProductResolver",
        "LOCATION_DIRECTORY": "countman.adapters.locations.ModelLocationDirectory",
        "VALIDATE_LOCATIONS": True,
        "UPSERT_BATCH_SIZE": 500,
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class CountmanSettings:
    """Countman configuration settings."""

    # Product resolver backend (dotted path)
    PRODUCT_RESOLVER: str = ""

    # Location directory backend (dotted path)
    LOCATION_DIRECTORY: str = "countman.adapters.locations.ModelLocationDirectory"

    # Reject scans/commits for locations the directory does not list
    VALIDATE_LOCATIONS: bool = True

    # Rows per INSERT ... ON CONFLICT statement during commit
    UPSERT_BATCH_SIZE: int = 500


def get_countman_settings() -> CountmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "COUNTMAN", {})
    return CountmanSettings(**{
        k: v for k, v in user_settings.items()
        if k in CountmanSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_countman_settings(), name)


countman_settings = _LazySettings()
