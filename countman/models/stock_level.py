"""
StockLevel model — Authoritative quantity of a product at a location.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class StockLevel(models.Model):
    """
    Authoritative on-hand/available quantity per (product_id, location).

    Only the reconciliation commit writes here, always as an absolute
    overwrite: a count replaces prior stock, it does not add to it.
    available is kept equal to on_hand (no reservations).
    """

    product_id = models.CharField(
        max_length=64,
        verbose_name=_('Product ID'),
    )
    location = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name=_('Location'),
    )
    on_hand = models.IntegerField(
        default=0,
        verbose_name=_('On hand'),
    )
    available = models.IntegerField(
        default=0,
        verbose_name=_('Available'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Stock Level')
        verbose_name_plural = _('Stock Levels')
        ordering = ['location', 'product_id']
        constraints = [
            models.UniqueConstraint(
                fields=['product_id', 'location'],
                name='unique_stock_level_per_product_location',
            ),
        ]

    def __str__(self) -> str:
        return f"{self.product_id} @ {self.location}: {self.on_hand}"
