"""
Draft store — per-(product, location) draft counts.

All state-changing methods use transaction.atomic() on the store's
database alias.
"""

import logging

from django.db import DEFAULT_DB_ALIAS, IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from countman.exceptions import CountError
from countman.models.draft import DraftCount
from countman.protocols.catalog import ProductInfo

logger = logging.getLogger('countman')

# Upper bound of DraftCount.quantity (PositiveIntegerField) on every backend
MAX_QUANTITY = 2147483647


class DraftStore:
    """Merge-or-create scans, review edits and listing of draft counts."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using

    def _drafts(self):
        return DraftCount.objects.using(self.using).drafts()

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    def list_drafts(self, location: str):
        """DRAFT rows of a location, most recently scanned first."""
        return self._drafts().at_location(location).for_review()

    def get(self, draft_id) -> DraftCount:
        """
        Fetch a draft by id.

        Raises:
            CountError('DRAFT_NOT_FOUND'): If no draft has this id
        """
        try:
            return self._drafts().get(pk=draft_id)
        except (DraftCount.DoesNotExist, ValueError, TypeError):
            raise CountError('DRAFT_NOT_FOUND', draft_id=draft_id)

    # ══════════════════════════════════════════════════════════════
    # MUTATIONS
    # ══════════════════════════════════════════════════════════════

    def record_scan(self, product: ProductInfo, location: str, user=None) -> DraftCount:
        """
        Add one scanned unit to the draft of (product, location).

        Increments the existing DRAFT row by exactly 1, or creates it
        with quantity 1. The user is recorded on creation only.

        Concurrency:
            - The increment is a single UPDATE ... SET quantity = quantity + 1
            - The insert runs in a savepoint; losing the race to a
              concurrent scan hits the unique constraint and the
              increment is applied to the winner's row instead

        Raises:
            CountError('CONCURRENT_MODIFICATION'): If the row disappears
                between the lost insert and the retry
            CountError('DUPLICATE_DRAFT'): If more than one draft exists
        """
        with transaction.atomic(using=self.using):
            created = False
            if not self._increment(product.product_id, location):
                try:
                    with transaction.atomic(using=self.using):
                        draft = self._drafts().create(
                            product_id=product.product_id,
                            product_code=product.code,
                            product_name=product.name,
                            location=location,
                            quantity=1,
                            user=user,
                        )
                    created = True
                except IntegrityError:
                    # Another scan inserted the row first
                    if not self._increment(product.product_id, location):
                        raise CountError(
                            'CONCURRENT_MODIFICATION',
                            product_id=product.product_id,
                            location=location,
                        )
            if not created:
                draft = self._get_for(product.product_id, location)

        logger.info(
            "count.scan",
            extra={
                "product_id": product.product_id,
                "location": location,
                "draft_id": draft.pk,
                "qty": draft.quantity,
                "created": created,
            },
        )
        return draft

    def set_quantity(self, draft_id, quantity: int) -> DraftCount | None:
        """
        Overwrite a draft's quantity during review.

        A quantity <= 0 removes the product from the count: the row is
        deleted and None is returned.

        Raises:
            CountError('DRAFT_NOT_FOUND'): If no draft has this id
            CountError('INVALID_QUANTITY'): If quantity is not an integer
                or exceeds MAX_QUANTITY
        """
        if isinstance(quantity, bool):
            raise CountError('INVALID_QUANTITY', requested=quantity)
        try:
            quantity = int(quantity)
        except (TypeError, ValueError):
            raise CountError('INVALID_QUANTITY', requested=quantity)
        if quantity > MAX_QUANTITY:
            raise CountError('INVALID_QUANTITY', requested=quantity, maximum=MAX_QUANTITY)

        with transaction.atomic(using=self.using):
            try:
                draft = self._drafts().select_for_update().get(pk=draft_id)
            except (DraftCount.DoesNotExist, ValueError, TypeError):
                raise CountError('DRAFT_NOT_FOUND', draft_id=draft_id)

            if quantity <= 0:
                draft.delete()
                logger.info(
                    "count.draft.delete",
                    extra={"draft_id": draft_id, "location": draft.location},
                )
                return None

            draft.quantity = quantity
            draft.save(update_fields=['quantity', 'updated_at'])

        logger.info(
            "count.draft.update",
            extra={"draft_id": draft.pk, "location": draft.location, "qty": quantity},
        )
        return draft

    # ══════════════════════════════════════════════════════════════
    # COMMIT SUPPORT (called inside the reconciler's transaction)
    # ══════════════════════════════════════════════════════════════

    def lock_for_commit(self, location: str) -> list[DraftCount]:
        """Snapshot a location's drafts, row-locked until the transaction ends."""
        return list(
            self._drafts().at_location(location).select_for_update().order_by('pk')
        )

    def delete_many(self, draft_ids: list[int], batch_size: int = 500) -> int:
        """Delete drafts by id, returning how many rows went away."""
        deleted = 0
        for start in range(0, len(draft_ids), batch_size):
            chunk = draft_ids[start:start + batch_size]
            deleted += self._drafts().filter(pk__in=chunk).delete()[0]
        return deleted

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _increment(self, product_id: str, location: str) -> int:
        return self._drafts().filter(
            product_id=product_id,
            location=location,
        ).update(
            quantity=F('quantity') + 1,
            updated_at=timezone.now(),
        )

    def _get_for(self, product_id: str, location: str) -> DraftCount:
        try:
            return self._drafts().get(product_id=product_id, location=location)
        except DraftCount.DoesNotExist:
            raise CountError(
                'CONCURRENT_MODIFICATION', product_id=product_id, location=location
            )
        except DraftCount.MultipleObjectsReturned:
            raise CountError(
                'DUPLICATE_DRAFT', product_id=product_id, location=location
            )
