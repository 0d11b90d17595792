from django.core.management.base import BaseCommand, CommandError
from apps.performance.dashboard import performance_context
from apps.performance.formatting import group_indian
from apps.performance.locale import Locale, phrases
from apps.performance.services import DashboardAPIClient, DashboardAPIError
import logging

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Show the latest normalized performance figures for a district'

    def add_arguments(self, parser):
        parser.add_argument('district', type=str, help='District name as listed by the backend')
        parser.add_argument(
            '--state',
            type=str,
            default=None,
            help='State name (defaults to MGNREGA_DEFAULT_STATE)',
        )
        parser.add_argument(
            '--limit',
            type=int,
            default=None,
            help='Number of months to fetch',
        )
        parser.add_argument(
            '--lang',
            choices=[l.value for l in Locale],
            default=Locale.EN.value,
            help='Display language',
        )
        parser.add_argument('--base-url', type=str, default=None, help='Backend base URL')

    def handle(self, *args, **options):
        district = options['district']
        locale = Locale(options['lang'])
        t = phrases(locale)
        client = DashboardAPIClient(base_url=options.get('base_url'))

        try:
            result = client.fetch_performance(district, state=options['state'], limit=options['limit'])
        except DashboardAPIError as e:
            raise CommandError(t.performance_error.format(detail=e)) from e

        perf = performance_context(result, locale, district)

        if 'raw' in perf:
            self.stdout.write(self.style.ERROR('✗ Backend returned a non-JSON body:'))
            self.stdout.write(perf['raw'][:200])
            return

        if perf.get('empty'):
            self.stdout.write(self.style.WARNING(f'⚠️ {t.no_data}: {t.no_records}'))
            if perf.get('source'):
                self.stdout.write(f"{t.source}: {perf['source']}")
            return

        self.stdout.write(self.style.SUCCESS(f'\n=== {t.selected}: {district} ===\n'))
        for card in perf['cards']:
            self.stdout.write(f"{card['label']}: {card['value']}")

        trend = perf['trend']
        if trend:
            self.stdout.write(self.style.WARNING(f"\n{perf['trend_title']}"))
            for point in trend.points:
                self.stdout.write(f'  {point.label}: {group_indian(point.value)}')
            self.stdout.write(f'  {t.average}: {trend.mean_display} {t.days}')

        self.stdout.write(self.style.WARNING(f'\n=== {t.table_title} ==='))
        self.stdout.write(' | '.join(perf['headers']))
        for row in perf['rows']:
            self.stdout.write(' | '.join(cell['text'] for cell in row))

        if perf.get('source'):
            self.stdout.write(f"\n{t.source}: {perf['source']}")
