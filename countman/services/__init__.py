"""
Count services — modular organization of count operations.

    from countman.services import DraftStore, StockLedger, Reconciler
"""

from countman.services.drafts import DraftStore
from countman.services.ledger import StockLedger
from countman.services.reconcile import Reconciler

__all__ = [
    'DraftStore',
    'StockLedger',
    'Reconciler',
]
