from django.conf import settings
from django.core.management.base import BaseCommand
from apps.performance import comparatives
from apps.performance.services import DashboardAPIClient, DashboardAPIError


class Command(BaseCommand):
    help = 'Check that every backend endpoint answers and report data coverage'

    def add_arguments(self, parser):
        parser.add_argument('--district', type=str, help='District to probe (defaults to the first listed)')
        parser.add_argument('--base-url', type=str, default=None, help='Backend base URL')

    def handle(self, *args, **options):
        client = DashboardAPIClient(base_url=options.get('base_url'))
        self.stdout.write(self.style.SUCCESS('\n=== Dashboard Backend Health Check ===\n'))
        self.stdout.write(f"Backend: {client.base_url or '(same origin)'}")
        self.stdout.write(f"State: {settings.MGNREGA_DEFAULT_STATE}")

        failures = 0

        try:
            districts = client.fetch_districts()
            self.stdout.write(f"Total Districts: {len(districts)}")
        except DashboardAPIError as e:
            districts = []
            failures += 1
            self.stdout.write(self.style.ERROR(f"✗ /api/districts: {e}"))

        district = options.get('district') or (districts[0].name if districts else None)
        if not district:
            self.stdout.write(self.style.ERROR('\nNo district to probe, stopping.'))
            return

        self.stdout.write(self.style.WARNING(f'\n=== Probing {district} ==='))

        try:
            result = client.fetch_performance(district)
            if result.is_empty:
                self.stdout.write(self.style.WARNING(f"  ⚠ /api/performance: no records (source: {result.source or 'n/a'})"))
            else:
                self.stdout.write(f"  ✓ /api/performance: {len(result.records)} records from {result.source or 'unknown'}")
        except DashboardAPIError as e:
            failures += 1
            self.stdout.write(self.style.ERROR(f"  ✗ /api/performance: {e}"))

        probes = [('/api/comparatives/state-average', lambda: client.fetch_state_comparison(district))]
        if len(districts) > 1:
            other = next(d.name for d in districts if d.name != district)
            probes.append((
                '/api/comparatives/district-comparison',
                lambda: client.fetch_district_comparison(district, other),
            ))

        for path, probe in probes:
            try:
                kind = comparatives.classify(probe())
            except DashboardAPIError as e:
                failures += 1
                self.stdout.write(self.style.ERROR(f"  ✗ {path}: {e}"))
                continue
            if kind in (comparatives.ERROR, comparatives.DISTRICT_ERROR, comparatives.UNKNOWN):
                self.stdout.write(self.style.WARNING(f"  ⚠ {path}: {kind}"))
            else:
                self.stdout.write(f"  ✓ {path}: {kind}")

        if failures:
            self.stdout.write(self.style.ERROR(f'\n⚠️  {failures} endpoint(s) failed'))
        else:
            self.stdout.write(self.style.SUCCESS('\n✓ Health check complete!'))
