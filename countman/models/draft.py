"""
DraftCount model — Provisional count of one product at one location.
"""

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from countman.models.enums import DraftStatus


class DraftCountQuerySet(models.QuerySet):
    """QuerySet with helper methods for draft queries."""

    def drafts(self):
        """Only rows still in DRAFT."""
        return self.filter(status=DraftStatus.DRAFT)

    def at_location(self, location: str):
        """Filter by location name."""
        return self.filter(location=location)

    def for_review(self):
        """Most recently scanned first."""
        return self.order_by('-scanned_at', '-id')


class DraftCount(models.Model):
    """
    Draft count of a product at a location.

    LIFECYCLE:

            scan (new)              scan (existing, +1)
      [absent] ──────────► [DRAFT] ──────────────────► [DRAFT]
                              │ set_quantity(<=0)         │ commit
                              ▼                           ▼
                          [absent]                    [absent] + StockLevel upserted

    Rules:
    - At most one DRAFT row per (product_id, location), enforced by a
      conditional unique constraint
    - quantity is always >= 1; a non-positive edit deletes the row
    - user is the staff member whose scan created the row
    """

    product_id = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name=_('Product ID'),
    )
    product_code = models.CharField(
        max_length=64,
        blank=True,
        default='',
        verbose_name=_('Code'),
        help_text=_('Scanned code at the time of the first scan.'),
    )
    product_name = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name=_('Product'),
    )
    location = models.CharField(
        max_length=100,
        verbose_name=_('Location'),
    )
    quantity = models.PositiveIntegerField(
        default=1,
        verbose_name=_('Quantity'),
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+',
        verbose_name=_('Counted by'),
    )
    status = models.CharField(
        max_length=20,
        choices=DraftStatus.choices,
        default=DraftStatus.DRAFT,
        verbose_name=_('Status'),
    )

    scanned_at = models.DateTimeField(default=timezone.now, db_index=True, verbose_name=_('Scanned at'))
    updated_at = models.DateTimeField(auto_now=True)

    objects = DraftCountQuerySet.as_manager()

    class Meta:
        verbose_name = _('Draft Count')
        verbose_name_plural = _('Draft Counts')
        ordering = ['-scanned_at', '-id']
        constraints = [
            models.UniqueConstraint(
                fields=['product_id', 'location'],
                condition=Q(status='DRAFT'),
                name='unique_draft_per_product_location',
            ),
        ]
        indexes = [
            models.Index(fields=['location', 'status'], name='countman_draft_loc_status_idx'),
        ]

    def __str__(self) -> str:
        name = self.product_name or self.product_id
        return f"{name} @ {self.location}: {self.quantity}"
