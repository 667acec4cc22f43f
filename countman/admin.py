"""
Countman Admin.

Provides views for count review and production debugging:
- Location: list + edit
- DraftCount: review list with editable quantity
- StockLevel: read-only (only commits write stock)
"""

import logging

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _

from countman.exceptions import CountError
from countman.models import DraftCount, Location, StockLevel

logger = logging.getLogger(__name__)


# =========================================================================
# LOCATION ADMIN
# =========================================================================

@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    """Location admin — editable, with commit action."""

    list_display = ['name', 'description', 'is_active', 'pending_display']
    list_filter = ['is_active']
    search_fields = ['name']
    readonly_fields = ['created_at', 'updated_at']
    actions = ['commit_drafts']

    @admin.display(description=_('Pending drafts'))
    def pending_display(self, obj):
        return DraftCount.objects.drafts().at_location(obj.name).count()

    @admin.action(description=_('Commit drafts of selected locations'))
    def commit_drafts(self, request, queryset):
        from countman import count

        promoted = 0
        for location in queryset:
            try:
                promoted += count.commit(location.name, user=request.user)
            except CountError as exc:
                logger.warning("commit_drafts: failed to commit %s: %s", location.name, exc)
                self.message_user(
                    request,
                    _('{location}: {message}').format(location=location.name, message=exc.message),
                    level=messages.ERROR,
                )

        self.message_user(request, _('{count} count(s) committed.').format(count=promoted))


# =========================================================================
# DRAFT COUNT ADMIN
# =========================================================================

@admin.register(DraftCount)
class DraftCountAdmin(admin.ModelAdmin):
    """Draft admin — review list. Quantities change through count.set_quantity()."""

    list_display = ['product_name', 'product_code', 'location', 'quantity', 'user', 'scanned_at']
    list_filter = ['location']
    search_fields = ['product_name', 'product_code', 'product_id']
    readonly_fields = ['product_id', 'product_code', 'product_name', 'location',
                       'user', 'status', 'scanned_at', 'updated_at']
    date_hierarchy = 'scanned_at'

    def has_add_permission(self, request):
        return False

    def save_model(self, request, obj, form, change):
        from countman import count

        count.set_quantity(obj.pk, obj.quantity)


# =========================================================================
# STOCK LEVEL ADMIN (read-only)
# =========================================================================

@admin.register(StockLevel)
class StockLevelAdmin(admin.ModelAdmin):
    """StockLevel admin — read-only. Stock only changes via commit."""

    list_display = ['product_id', 'location', 'on_hand', 'available', 'updated_at']
    list_filter = ['location']
    search_fields = ['product_id']
    readonly_fields = ['product_id', 'location', 'on_hand', 'available',
                       'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
