from django.core.management.base import BaseCommand, CommandError
from apps.districts.services import DistrictService
from apps.performance.services import DashboardAPIClient, DashboardAPIError
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Fetch all districts from the dashboard backend API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--search',
            type=str,
            help='Only show districts whose name contains this text',
        )
        parser.add_argument(
            '--base-url',
            type=str,
            default=None,
            help='Backend base URL (defaults to the configured one)',
        )
        parser.add_argument(
            '--limit',
            type=int,
            default=20,
            help='Maximum districts to print (default: 20, 0 for all)',
        )

    def handle(self, *args, **options):
        search = (options.get('search') or '').strip().lower()
        limit = options.get('limit', 20)

        client = DashboardAPIClient(base_url=options.get('base_url'))
        self.stdout.write(self.style.SUCCESS(f'Fetching districts from {client.url("/api/districts")}...'))

        try:
            districts = DistrictService.get_districts(client, force_refresh=True)
        except DashboardAPIError as e:
            self.stdout.write(self.style.ERROR(f'❌ API request failed: {e}'))
            raise CommandError(str(e)) from e

        if not districts:
            self.stdout.write(self.style.ERROR('❌ No districts returned by the backend'))
            return

        matches = [d for d in districts if search in d.name.lower()] if search else districts
        self.stdout.write(self.style.SUCCESS(f'✓ Found {len(matches)} of {len(districts)} districts'))

        for idx, district in enumerate(matches, 1):
            if limit and idx > limit:
                self.stdout.write(f'  ... (showing first {limit} only)')
                break
            self.stdout.write(f'  ✓ {district.name} (ID: {district.id})')
