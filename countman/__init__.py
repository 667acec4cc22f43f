"""
Django Countman — Physical Stock Count Reconciliation.

Staff scan barcodes into draft counts, a reviewer corrects them, and a
commit promotes a location's drafts onto authoritative stock levels.

Usage:
    from countman import count, CountError

    count.scan('A1', 'Dock', user)
    count.scan('A1', 'Dock', user)
    count.commit('Dock')  # 1 (A1 @ Dock: on_hand=2)
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'count':
        from countman.service import count
        return count
    elif name == 'Count':
        from countman.service import Count
        return Count
    elif name == 'CountError':
        from countman.exceptions import CountError
        return CountError
    elif name == 'Location':
        from countman.models.location import Location
        return Location
    elif name == 'DraftCount':
        from countman.models.draft import DraftCount
        return DraftCount
    elif name == 'StockLevel':
        from countman.models.stock_level import StockLevel
        return StockLevel
    elif name == 'DraftStatus':
        from countman.models.enums import DraftStatus
        return DraftStatus
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'count',
    'Count',
    'CountError',
    'Location',
    'DraftCount',
    'StockLevel',
    'DraftStatus',
]

__version__ = '0.1.0'
