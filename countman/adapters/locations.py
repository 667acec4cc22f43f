"""
Countman Location Adapters — location directory backends.

The default backend lists active Location rows. Hosts with their own
location registry point COUNTMAN["LOCATION_DIRECTORY"] at a class
implementing the LocationDirectory protocol.
"""

from __future__ import annotations

import threading

from countman.adapters.catalog import load_adapter
from countman.conf import countman_settings
from countman.protocols.locations import LocationDirectory


class ModelLocationDirectory:
    """Location directory backed by the countman Location model."""

    def list_locations(self) -> list[str]:
        from countman.models import Location

        return list(
            Location.objects.filter(is_active=True)
            .order_by('name')
            .values_list('name', flat=True)
        )


_lock = threading.Lock()
_location_directory: LocationDirectory | None = None


def get_location_directory() -> LocationDirectory:
    """
    Return the configured location directory.

    Raises:
        ImproperlyConfigured: If LOCATION_DIRECTORY is empty or import fails
    """
    global _location_directory

    if _location_directory is None:
        with _lock:
            if _location_directory is None:
                _location_directory = load_adapter(
                    countman_settings.LOCATION_DIRECTORY, "LOCATION_DIRECTORY"
                )

    return _location_directory


def reset_location_directory() -> None:
    """Reset the cached directory. Useful for testing."""
    global _location_directory
    _location_directory = None
