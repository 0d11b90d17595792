"""Resolve canonical metric keys against loosely-shaped performance records.

The backend passes through records from several sources: raw data.gov.in
rows (verbose labels such as ``Total_Households_Worked``), its own entity
serialization (camelCase) and the canonical snake_case names. Resolution
never merges or computes anything, it only looks a value up with fallback.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

PLACEHOLDER = '-'


class Unavailable:
    """Sentinel for "no usable value found in the record"."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __str__(self):
        return PLACEHOLDER

    def __repr__(self):
        return 'UNAVAILABLE'


UNAVAILABLE = Unavailable()

CANONICAL_KEYS = (
    'fin_year',
    'month',
    'state_name',
    'district_name',
    'households_worked',
    'persondays_generated',
    'women_persondays_percent',
    'no_of_ongoing_works',
    'no_of_completed_works',
    'avg_wage_rate',
    'total_wages',
)

# Keys shown in the detailed records table, in column order
TABLE_KEYS = (
    'month',
    'fin_year',
    'households_worked',
    'persondays_generated',
    'no_of_ongoing_works',
    'no_of_completed_works',
    'avg_wage_rate',
    'total_wages',
)

ALTERNATE_LABELS = {
    'avg_wage_rate': ('Average_Wage_rate_per_day_per_person', 'average_wage_rate'),
    'total_wages': ('Material_and_skilled_Wages', 'Wages', 'Total_Wages'),
    'households_worked': (
        'Total_Households_Worked',
        'Households_Worked',
        'No_of_Households_Worked',
        'Number_of_Households_Worked',
    ),
    'persondays_generated': (
        'Total_Persondays_Generated',
        'Persondays_Generated',
        'Persondays_of_Central_Liability_so_far',
    ),
    'no_of_ongoing_works': (
        'Number_of_Ongoing_Works',
        'No_of_Ongoing_Works',
        'Ongoing_Works',
        'OngoingWorks',
    ),
    'no_of_completed_works': (
        'Number_of_Completed_Works',
        'No_of_Completed_Works',
        'Completed_Works',
        'CompletedWorks',
    ),
    'women_persondays_percent': ('Women_Persondays_Percent', 'percent_of_Women_Persondays'),
    'district_name': ('districtname', 'dist_name', 'District_Name', 'DISTRICT_NAME'),
    'state_name': ('statename', 'State_Name', 'STATE_NAME'),
}


def camel_case(key):
    """``no_of_ongoing_works`` -> ``noOfOngoingWorks``"""
    words = key.split('_')
    return words[0] + ''.join(w[:1].upper() + w[1:] for w in words[1:])


def _search_order(key):
    order = [key]
    for label in (camel_case(key),) + ALTERNATE_LABELS.get(key, ()):
        if label not in order:
            order.append(label)
    return tuple(order)


SEARCH_ORDER = MappingProxyType({key: _search_order(key) for key in CANONICAL_KEYS})


def is_present(value):
    return value is not None and value != '' and value is not UNAVAILABLE


def search_order(key):
    """Ordered candidate field names for ``key``; unknown keys get key + camelCase."""
    return SEARCH_ORDER.get(key) or _search_order(key)


def resolve(record, key):
    """Return the first populated value for ``key`` or ``UNAVAILABLE``."""
    if not isinstance(record, Mapping):
        return UNAVAILABLE
    for candidate in search_order(key):
        value = record.get(candidate)
        if is_present(value):
            return value
    return UNAVAILABLE


@dataclass(frozen=True)
class ResolvedField:
    key: str
    value: object
    raw: bool = False

    @property
    def available(self):
        return self.value is not UNAVAILABLE


def resolve_field(record, key):
    return ResolvedField(key, resolve(record, key))


def resolve_record(record, keys=CANONICAL_KEYS):
    return tuple(resolve_field(record, key) for key in keys)


def summary_fields(record):
    """Fields for the summary cards of the newest record.

    Only the canonical and camelCase spellings count here. When a record has
    none of them, the first six raw fields are shown as they are.
    """
    if not isinstance(record, Mapping):
        return ()

    fields = []
    for key in CANONICAL_KEYS:
        for candidate in (key, camel_case(key)):
            value = record.get(candidate)
            if value is not None:
                fields.append(ResolvedField(key, value))
                break

    if not fields:
        fields = [
            ResolvedField(str(k), str(v), raw=True)
            for k, v in list(record.items())[:6]
            if v is not None
        ]
    return tuple(fields)
