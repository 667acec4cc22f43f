"""
Countman signals.

counts_committed is sent once a commit is durable (transaction.on_commit),
with kwargs: location, count, user.
"""

from django.dispatch import Signal

counts_committed = Signal()
