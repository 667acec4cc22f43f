"""
Reconciliation — promote a location's drafts into the stock ledger.

The whole drain (snapshot, upserts, draft deletion) is one atomic unit:
either every draft of the snapshot becomes a stock level and disappears,
or nothing changes and a retry sees the same draft set.
"""

import logging
from functools import partial

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction

from countman.exceptions import CountError
from countman.services.drafts import DraftStore
from countman.services.ledger import StockLedger
from countman.signals import counts_committed

logger = logging.getLogger('countman')


class Reconciler:
    """Commits draft counts onto authoritative stock levels."""

    def __init__(self, drafts: DraftStore | None = None,
                 ledger: StockLedger | None = None,
                 using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.drafts = drafts or DraftStore(using=using)
        self.ledger = ledger or StockLedger(using=using)

    def commit(self, location: str, user=None) -> int:
        """
        Promote every DRAFT row of a location.

        1. Snapshot the location's drafts with select_for_update()
        2. Upsert each into the stock ledger (on_hand = available = quantity)
        3. Delete exactly the snapshot rows
        4. After the transaction commits, send counts_committed

        Drafts created by scans that arrive during the commit are not in
        the snapshot and stay for the next commit. Scans incrementing a
        snapshot row wait on its lock, then find it gone and start a new
        draft.

        Returns:
            Number of rows promoted (0 when the location has no drafts)

        Raises:
            CountError('COMMIT_FAILED'): On any database error; everything
                is rolled back before this is raised
            CountError('CONCURRENT_MODIFICATION'): If a snapshot row could
                not be deleted; rolled back as well
        """
        try:
            with transaction.atomic(using=self.using):
                snapshot = self.drafts.lock_for_commit(location)
                promoted = self.ledger.upsert_many(
                    (draft.product_id, location, draft.quantity) for draft in snapshot
                )

                draft_ids = [draft.pk for draft in snapshot]
                deleted = self.drafts.delete_many(draft_ids)
                if deleted != len(draft_ids):
                    raise CountError(
                        'CONCURRENT_MODIFICATION',
                        location=location,
                        expected=len(draft_ids),
                        deleted=deleted,
                    )

                if promoted:
                    transaction.on_commit(
                        partial(self._notify, location, promoted, user),
                        using=self.using,
                    )
        except DatabaseError as e:
            logger.exception(
                "count.commit.failed",
                extra={"location": location},
            )
            raise CountError('COMMIT_FAILED', location=location) from e

        logger.info(
            "count.commit",
            extra={
                "location": location,
                "promoted": promoted,
                "user": str(user) if user else None,
            },
        )
        return promoted

    def pending(self, location: str) -> int:
        """Number of drafts a commit of this location would promote."""
        return self.drafts.list_drafts(location).count()

    def _notify(self, location: str, count: int, user) -> None:
        counts_committed.send(
            sender=self.__class__,
            location=location,
            count=count,
            user=user,
        )
