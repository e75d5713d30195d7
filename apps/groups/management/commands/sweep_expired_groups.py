"""
Management command to delete groups nobody has touched for a long time.

Meant to run on a schedule (cron, a platform scheduler, ...). A failed
run is logged and exits normally; the next run tries again.

Usage:
    python manage.py sweep_expired_groups
    python manage.py sweep_expired_groups --days 365 --dry-run
"""

import logging
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError

from apps.groups.services import (
    StorageUnavailableError,
    count_expired_groups,
    get_retention_period,
    sweep_expired_groups,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Delete groups not modified within the retention period'

    def add_arguments(self, parser):
        parser.add_argument(
            '--days',
            type=int,
            default=None,
            help='Retention period in days (default: GROUP_RETENTION_DAYS)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show how many groups would be deleted without deleting them',
        )

    def handle(self, *args, **options):
        days = options['days']
        if days is not None and days < 1:
            raise CommandError('--days must be at least 1')

        max_age = timedelta(days=days) if days is not None else get_retention_period()

        if options['dry_run']:
            try:
                count = count_expired_groups(max_age=max_age)
            except StorageUnavailableError as e:
                raise CommandError(str(e))
            self.stdout.write(
                self.style.WARNING(
                    f'--dry-run mode: {count} group(s) older than {max_age.days} days would be deleted.'
                )
            )
            return

        try:
            deleted = sweep_expired_groups(max_age=max_age)
        except StorageUnavailableError as e:
            logger.error("Retention sweep failed: %s", e)
            self.stdout.write(self.style.WARNING(f'Sweep failed, nothing deleted: {e}'))
            return

        if deleted == 0:
            self.stdout.write(self.style.SUCCESS('No expired groups to delete.'))
            return

        self.stdout.write(
            self.style.SUCCESS(f'Deleted {deleted} group(s) older than {max_age.days} days.')
        )
