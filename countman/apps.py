"""Django app configuration for Countman."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CountmanConfig(AppConfig):
    """Configuration for Countman app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "countman"
    verbose_name = _("Stock Counts")
