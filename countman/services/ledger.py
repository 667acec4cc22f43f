"""
Stock ledger — authoritative stock levels.

Writes are INSERT ... ON CONFLICT (product_id, location) DO UPDATE
statements, so there is never a separate exists-check to race against.
"""

from django.db import DEFAULT_DB_ALIAS, transaction

from countman.conf import countman_settings
from countman.exceptions import CountError
from countman.models.stock_level import StockLevel


class StockLedger:
    """Upsert and read StockLevel rows."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS, batch_size: int | None = None):
        self.using = using
        self.batch_size = batch_size

    def _levels(self):
        return StockLevel.objects.using(self.using)

    def get(self, product_id: str, location: str) -> StockLevel | None:
        return self._levels().filter(product_id=product_id, location=location).first()

    def for_location(self, location: str):
        return self._levels().filter(location=location).order_by('product_id')

    def upsert(self, product_id: str, location: str, quantity: int) -> StockLevel:
        """
        Set on_hand = available = quantity, inserting the row if absent.

        Absolute overwrite: committing 5 over a stock of 10 leaves 5.

        Raises:
            CountError('INVALID_QUANTITY'): If quantity is negative
        """
        self.upsert_many([(product_id, location, quantity)])
        return self._levels().get(product_id=product_id, location=location)

    def upsert_many(self, entries) -> int:
        """
        Upsert (product_id, location, quantity) entries.

        Runs in batches of UPSERT_BATCH_SIZE under one atomic block; when
        called inside a wider transaction, a failing batch undoes every
        earlier one. A pair listed twice keeps its last quantity.

        Returns:
            Number of distinct (product_id, location) pairs written
        """
        latest = {}
        for product_id, location, quantity in entries:
            if quantity < 0:
                raise CountError(
                    'INVALID_QUANTITY',
                    product_id=product_id,
                    location=location,
                    requested=quantity,
                )
            latest[(product_id, location)] = quantity

        rows = [
            StockLevel(product_id=product_id, location=location, on_hand=qty, available=qty)
            for (product_id, location), qty in latest.items()
        ]
        if not rows:
            return 0

        batch_size = self.batch_size or countman_settings.UPSERT_BATCH_SIZE
        with transaction.atomic(using=self.using):
            for start in range(0, len(rows), batch_size):
                self._write_batch(rows[start:start + batch_size])
        return len(rows)

    def _write_batch(self, rows: list[StockLevel]) -> None:
        self._levels().bulk_create(
            rows,
            update_conflicts=True,
            unique_fields=['product_id', 'location'],
            update_fields=['on_hand', 'available', 'updated_at'],
        )
