"""
Count Service — The single public interface for stock count operations.

Usage:
    from countman import count, CountError

    count.scan('7891234567890', 'Dock', user)
    count.review('Dock')                # drafts, most recent first
    count.set_quantity(draft.pk, 7)
    count.commit('Dock', user)          # 1
"""

from dataclasses import dataclass

from django.db import DEFAULT_DB_ALIAS

from countman.adapters.catalog import get_product_resolver
from countman.adapters.locations import get_location_directory
from countman.conf import countman_settings
from countman.exceptions import CountError
from countman.models.draft import DraftCount
from countman.models.stock_level import StockLevel
from countman.protocols.catalog import ProductInfo, ProductResolver
from countman.protocols.locations import LocationDirectory
from countman.services.drafts import DraftStore
from countman.services.ledger import StockLedger
from countman.services.reconcile import Reconciler


@dataclass(frozen=True)
class ScanResult:
    """Outcome of a scan: the resolved product and its draft row."""

    product: ProductInfo
    draft: DraftCount


class Count:
    """
    Single interface for all count operations.

    Collaborators are injected; anything left out falls back to the
    adapters configured in COUNTMAN settings and the default database.

        Count(resolver=MyCatalog(), directory=MyLocations(), using='inventory')

    IMPORTANT: All state-changing methods run in atomic transactions on
    the `using` database. See DraftStore and Reconciler for locking.
    """

    def __init__(self, resolver: ProductResolver | None = None,
                 directory: LocationDirectory | None = None,
                 using: str = DEFAULT_DB_ALIAS):
        self._resolver = resolver
        self._directory = directory
        self.using = using
        self.drafts = DraftStore(using=using)
        self.ledger = StockLedger(using=using)
        self.reconciler = Reconciler(drafts=self.drafts, ledger=self.ledger, using=using)

    @property
    def resolver(self) -> ProductResolver:
        return self._resolver or get_product_resolver()

    @property
    def directory(self) -> LocationDirectory:
        return self._directory or get_location_directory()

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    def locations(self) -> list[str]:
        """Valid location names, as listed by the location directory."""
        return list(self.directory.list_locations())

    def resolve(self, code: str) -> ProductInfo:
        """
        Resolve a scanned code to a product.

        Raises:
            CountError('PRODUCT_NOT_FOUND'): If the resolver does not know the code
        """
        product = self.resolver.resolve(code)
        if product is None:
            raise CountError('PRODUCT_NOT_FOUND', barcode=code)
        return product

    def review(self, location: str):
        """
        Drafts of a location, most recently scanned first.

        Not checked against the directory: drafts left at a location that
        was since deactivated stay visible. Unknown locations give an
        empty result.

        Raises:
            CountError('LOCATION_NOT_FOUND'): If location is blank
        """
        self._require_location(location)
        return self.drafts.list_drafts(location)

    def stock_level(self, product_id: str, location: str) -> StockLevel | None:
        """Authoritative stock row of a pair, or None if never committed."""
        return self.ledger.get(product_id, location)

    def pending(self, location: str) -> int:
        """How many drafts a commit of this location would promote."""
        return self.reconciler.pending(location)

    # ══════════════════════════════════════════════════════════════
    # DRAFTS
    # ══════════════════════════════════════════════════════════════

    def scan(self, code: str, location: str, user=None) -> ScanResult:
        """
        Record one scanned unit of a product at a location.

        The product is resolved before any write, so an unknown code
        leaves no trace.

        Raises:
            CountError('PRODUCT_NOT_FOUND'): Unknown code
            CountError('LOCATION_NOT_FOUND'): Unknown location
        """
        self._check_location(location)
        product = self.resolve(code)
        draft = self.drafts.record_scan(product, location, user=user)
        return ScanResult(product=product, draft=draft)

    def set_quantity(self, draft_id, quantity: int) -> DraftCount | None:
        """
        Overwrite a draft's quantity; quantity <= 0 deletes the draft.

        Raises:
            CountError('DRAFT_NOT_FOUND'): If draft_id is not a draft
        """
        return self.drafts.set_quantity(draft_id, quantity)

    # ══════════════════════════════════════════════════════════════
    # COMMIT
    # ══════════════════════════════════════════════════════════════

    def commit(self, location: str, user=None) -> int:
        """
        Promote a location's drafts onto stock levels, all or nothing.

        Like review, only a blank location is refused: drafts stranded at a
        deactivated location can still be promoted. A location without
        drafts commits nothing and returns 0.

        Returns:
            Number of rows promoted

        Raises:
            CountError('LOCATION_NOT_FOUND'): Blank location
            CountError('COMMIT_FAILED'): Storage error, fully rolled back
        """
        self._require_location(location)
        return self.reconciler.commit(location, user=user)

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _require_location(self, location: str) -> None:
        if not location:
            raise CountError('LOCATION_NOT_FOUND', location=location)

    def _check_location(self, location: str) -> None:
        self._require_location(location)
        if countman_settings.VALIDATE_LOCATIONS and location not in self.locations():
            raise CountError('LOCATION_NOT_FOUND', location=location)


count = Count()
