"""Presentation of the backend's comparative results.

The backend computes every comparison; this module only decides which
shape a payload has and formats it.
"""
from dataclasses import dataclass

from apps.performance.formatting import (
    PLACEHOLDER,
    format_grouped,
    format_number,
    format_signed_percent,
    parse_number,
)
from apps.performance.locale import phrases

ERROR = 'error'
NO_DATA = 'no_data'
STATE_AVERAGE = 'state_average'
DISTRICT_COMPARISON = 'district_comparison'
DISTRICT_ERROR = 'district_error'
UNKNOWN = 'unknown'

MAX_LISTED = 10


def classify(payload):
    if not isinstance(payload, dict):
        return UNKNOWN
    if payload.get('error'):
        return ERROR
    if 'stateAveragePersondays' in payload:
        state_avg = parse_number(payload.get('stateAveragePersondays')) or 0
        district_value = parse_number(payload.get('districtPersondays')) or 0
        if state_avg == 0 and district_value == 0:
            return NO_DATA
        return STATE_AVERAGE
    d1, d2 = payload.get('district1'), payload.get('district2')
    if d1 and d2:
        if _side_error(d1) or _side_error(d2):
            return DISTRICT_ERROR
        return DISTRICT_COMPARISON
    return UNKNOWN


def _side_error(side):
    return side.get('error') if isinstance(side, dict) else 'No data available for comparison'


def truncate(items, limit=MAX_LISTED):
    """First ``limit`` entries and whether anything was cut."""
    items = [str(i) for i in (items or [])]
    return items[:limit], len(items) > limit


@dataclass(frozen=True)
class Comparison:
    kind: str
    title: str = ''
    message: str = ''
    hint: str = ''
    cards: tuple = ()
    listed: tuple = ()
    listed_label: str = ''
    listed_truncated: bool = False
    verdict: str = ''
    above: bool = None
    period: str = ''


def present(payload, locale):
    """Build the display model for a comparative payload."""
    t = phrases(locale)
    kind = classify(payload)

    if kind == ERROR:
        return Comparison(
            kind=kind,
            title=t.error,
            message=str(payload['error']),
            hint=str(payload.get('hint') or ''),
            listed=tuple(str(s) for s in payload.get('availableStates') or ()),
            listed_label=t.available_states,
            verdict=t.load_performance_first,
        )

    if kind == NO_DATA:
        missing = bool(payload.get('districtDataMissing'))
        listed, cut = truncate(payload.get('availableDistricts')) if missing else ([], False)
        return Comparison(
            kind=kind,
            title=t.warning,
            message=t.both_zero,
            hint=t.district_missing if missing else t.click_view_performance,
            listed=tuple(listed),
            listed_label=t.available_districts,
            listed_truncated=cut,
        )

    if kind == STATE_AVERAGE:
        return _present_state_average(payload, t)

    if kind == DISTRICT_ERROR:
        d1, d2 = payload['district1'], payload['district2']
        return Comparison(
            kind=kind,
            title=t.error,
            message=str(_side_error(d1) or _side_error(d2)),
            hint=t.need_both_districts,
        )

    if kind == DISTRICT_COMPARISON:
        return _present_district_comparison(payload, t)

    return Comparison(kind=UNKNOWN)


def _present_state_average(payload, t):
    state_avg = parse_number(payload.get('stateAveragePersondays')) or 0
    district_value = parse_number(payload.get('districtPersondays')) or 0
    comparable = state_avg > 0 and district_value > 0
    above = bool(payload.get('aboveStateAverage'))

    difference = PLACEHOLDER
    verdict = ''
    if comparable:
        difference = format_signed_percent(payload.get('persondaysDifferencePercent') or 0)
        verdict = t.above_average if above else t.below_average

    period = ''
    if payload.get('month') and payload.get('year'):
        period = f"{payload['month']} {payload['year']}"

    return Comparison(
        kind=STATE_AVERAGE,
        title=t.compare_state,
        cards=(
            (t.state_average, format_number(payload.get('stateAveragePersondays')), t.employment_days),
            (t.your_district, format_number(payload.get('districtPersondays')), t.employment_days),
            (t.difference, difference, verdict),
        ),
        verdict=verdict,
        above=above if comparable else None,
        period=period,
    )


def _present_district_comparison(payload, t):
    d1, d2 = payload['district1'], payload['district2']
    cards = [
        (str(d1.get('name', '')), format_grouped(d1.get('persondaysGenerated')), t.persondays),
        (str(d2.get('name', '')), format_grouped(d2.get('persondaysGenerated')), t.persondays),
    ]
    better = payload.get('betterDistrict')
    if better:
        diff = parse_number(payload.get('differencePersondays'))
        note = f'{format_grouped(abs(diff))} {t.more_persondays}' if diff else ''
        cards.append((t.better_district, str(better), note))
    return Comparison(
        kind=DISTRICT_COMPARISON,
        title=t.compare_district,
        cards=tuple(cards),
        verdict=str(better or ''),
    )
