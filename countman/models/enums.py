"""
Enums for Countman models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class DraftStatus(models.TextChoices):
    """
    Draft count lifecycle status.

    Only DRAFT rows are ever stored. Commit deletes the row instead of
    flipping it, so COMMITTED is a terminal state that is never persisted.
    """
    DRAFT = 'DRAFT', _('Draft')
    COMMITTED = 'COMMITTED', _('Committed')
