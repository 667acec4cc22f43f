"""
Location Directory Protocol — Interface for listing counting locations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LocationDirectory(Protocol):
    """Protocol for the directory of valid location names."""

    def list_locations(self) -> list[str]:
        """
        List valid location names.

        Returns:
            Location names, ordered by name
        """
        ...
