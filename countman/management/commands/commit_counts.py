"""
Management command to commit a location's draft counts.

Usage:
    python manage.py commit_counts Dock
    python manage.py commit_counts Dock --dry-run
"""

from django.core.management.base import BaseCommand, CommandError

from countman import count
from countman.exceptions import CountError


class Command(BaseCommand):
    """Commit draft counts command."""

    help = 'Promotes the draft counts of a location onto stock levels'

    def add_arguments(self, parser):
        parser.add_argument('location', help='Location name')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show how many drafts would be committed without committing'
        )

    def handle(self, *args, **options):
        location = options['location']

        if options['dry_run']:
            pending = count.pending(location)
            self.stdout.write(f'{pending} draft(s) would be committed at {location}')
            return

        try:
            promoted = count.commit(location)
        except CountError as exc:
            raise CommandError(f'{exc.code}: {exc.message}') from exc

        self.stdout.write(
            self.style.SUCCESS(f'{promoted} draft(s) committed at {location}')
        )
