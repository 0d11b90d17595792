"""Display formatting for metric values (Indian numbering system)."""
import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext

from django.utils import numberformat

from apps.performance.normalizer import PLACEHOLDER, UNAVAILABLE

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

RUPEE = '₹'

# en-IN grouping: last three digits, then pairs (12,34,56,789)
INDIAN_GROUPING = (3, 2, 0)

CURRENCY_KEYS = frozenset({'avg_wage_rate', 'total_wages'})
PERCENT_KEYS = frozenset({'women_persondays_percent'})
COUNT_KEYS = frozenset({
    'households_worked',
    'persondays_generated',
    'no_of_ongoing_works',
    'no_of_completed_works',
})

_NUMERIC_PREFIX = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def is_placeholder(value):
    return value is None or value is UNAVAILABLE or value == PLACEHOLDER


def parse_number(value):
    """Parse a count or numeric string, ignoring grouping commas.

    Strings are read up to the first character that cannot continue a
    number, so ``"12 days"`` is 12. Returns ``None`` when nothing numeric
    can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        num = float(value)
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.replace(',', ''))
        if not match:
            return None
        num = float(match.group(1))
    else:
        return None

    if math.isnan(num) or math.isinf(num):
        return None
    return num


def to_fixed(num, places):
    """Fixed-point text with half-away-from-zero rounding of the exact value."""
    exact = Decimal(num)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction digits
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return '{:f}'.format(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def group_indian(num):
    """en-IN digit grouping with at most three fraction digits."""
    text = to_fixed(num, 3)
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return str(numberformat.format(
        text,
        '.',
        grouping=INDIAN_GROUPING,
        thousand_sep=',',
        force_grouping=True,
    ))


def _abbreviate(num):
    # Signed comparison: negative values never get a unit
    if num >= CRORE:
        return f'{to_fixed(num / CRORE, 2)} Cr'
    if num >= LAKH:
        return f'{to_fixed(num / LAKH, 2)} Lakh'
    if num >= THOUSAND:
        return f'{to_fixed(num / THOUSAND, 1)}K'
    return group_indian(num)


def format_number(value):
    if is_placeholder(value):
        return PLACEHOLDER
    num = parse_number(value)
    if num is None:
        return value
    return _abbreviate(num)


def format_currency(value):
    if is_placeholder(value):
        return PLACEHOLDER
    num = parse_number(value)
    if num is None:
        return value
    return f'{RUPEE}{_abbreviate(num)}'


def format_percent(value):
    if is_placeholder(value):
        return PLACEHOLDER
    num = parse_number(value)
    if num is None:
        return value
    return f'{to_fixed(num, 1)}%'


def format_grouped(value):
    """Grouped digits without unit abbreviation, e.g. 2,50,000."""
    if is_placeholder(value):
        return PLACEHOLDER
    num = parse_number(value)
    if num is None:
        return value
    return group_indian(num)


def format_signed_percent(value):
    num = parse_number(value)
    if num is None:
        return PLACEHOLDER
    sign = '+' if num > 0 else ''
    return f'{sign}{to_fixed(num, 1)}%'


def format_field(key, value):
    """Format a resolved value with the rule its canonical key selects."""
    if key in CURRENCY_KEYS:
        return format_currency(value)
    if key in PERCENT_KEYS:
        return format_percent(value)
    if key in COUNT_KEYS:
        return format_number(value)
    if is_placeholder(value):
        return PLACEHOLDER
    return str(value)
