"""
Exceptions for Countman.

All errors are CountError with a structured code for programmatic handling.
"""

from typing import Any


NOT_FOUND = 'NotFound'
CONFLICT = 'Conflict'
STORAGE_FAILURE = 'StorageFailure'
INVALID = 'Invalid'


class CountError(Exception):
    """
    Structured exception for count operations.

    Usage:
        try:
            count.scan('A1', 'Dock', user)
        except CountError as e:
            if e.code == 'PRODUCT_NOT_FOUND':
                print(f"Unknown barcode {e.data['barcode']}")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
        kind: Error family (NotFound, Conflict, StorageFailure, Invalid)
    """

    _default_messages = {
        'PRODUCT_NOT_FOUND': 'Product not found',
        'DRAFT_NOT_FOUND': 'Draft count not found',
        'LOCATION_NOT_FOUND': 'Location not found',
        'DUPLICATE_DRAFT': 'More than one draft count for this product and location',
        'CONCURRENT_MODIFICATION': 'Concurrent modification detected',
        'COMMIT_FAILED': 'Commit failed, no changes were applied',
        'STORAGE_FAILURE': 'Storage failure',
        'INVALID_QUANTITY': 'Invalid quantity',
    }

    _kinds = {
        'PRODUCT_NOT_FOUND': NOT_FOUND,
        'DRAFT_NOT_FOUND': NOT_FOUND,
        'LOCATION_NOT_FOUND': NOT_FOUND,
        'DUPLICATE_DRAFT': CONFLICT,
        'CONCURRENT_MODIFICATION': CONFLICT,
        'COMMIT_FAILED': STORAGE_FAILURE,
        'STORAGE_FAILURE': STORAGE_FAILURE,
        'INVALID_QUANTITY': INVALID,
    }

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        """Error family of this code."""
        return self._kinds.get(self.code, STORAGE_FAILURE)

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {
                k: v if isinstance(v, (int, float, bool, type(None))) else str(v)
                for k, v in self.data.items()
            }
        }

    def __repr__(self) -> str:
        return f"CountError({self.code!r}, {self.message!r})"
