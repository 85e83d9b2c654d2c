"""
Clear promotion flags on services whose promotion window has closed.

Ranked views already ignore lapsed promotions; this keeps the stored
flags tidy. Safe to run from cron.

Usage:
    python manage.py expire_promotions [--dry-run]
"""

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.catalog.models import Service
from apps.catalog.services import expire_lapsed_promotions


class Command(BaseCommand):
    help = 'Clear promotion flags on services whose promotion window has closed'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show how many services would be updated without making changes',
        )

    def handle(self, *args, **options):
        now = timezone.now()
        lapsed = Service.objects.lapsed_promotions(now)

        if options['dry_run']:
            self.stdout.write(f'{lapsed.count()} service(s) have lapsed promotions')
            self.stdout.write(self.style.WARNING('--dry-run mode: No changes made.'))
            return

        count = expire_lapsed_promotions(now)
        self.stdout.write(self.style.SUCCESS(f'Expired promotions on {count} service(s)'))
