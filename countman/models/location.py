"""
Location model — Where counts are taken.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Location(models.Model):
    """
    A named physical counting area (warehouse zone, dock, shelf row).

    Backs the default location directory. Locations are stable entities,
    created during system setup; deactivate rather than delete them so
    historical stock levels keep a meaningful name.

    Examples:
        Location.objects.create(name='Dock')
        Location.objects.create(name='Aisle 4', description='Cold storage')
    """

    name = models.CharField(
        unique=True,
        max_length=100,
        verbose_name=_('Name'),
        help_text=_('Unique location name (ex: Dock, Aisle 4)'),
    )
    description = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name=_('Description'),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_('Active'),
        help_text=_('Inactive locations are hidden from scanners.'),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _('Location')
        verbose_name_plural = _('Locations')
        ordering = ['name']

    def __str__(self) -> str:
        return self.name
