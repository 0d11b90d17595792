"""Fetch orchestration and display context for the performance dashboard.

Each ``load_*`` helper performs one fetch as a started/succeeded/failed
action sequence against the state reducer, so a failure only ever lands in
the slot of the fetch that caused it.
"""
import logging

from apps.districts.services import DistrictService
from apps.performance import comparatives
from apps.performance.formatting import (
    CURRENCY_KEYS,
    format_currency,
    format_field,
    format_grouped,
    is_placeholder,
    parse_number,
)
from apps.performance.locale import GLOSSARY, Locale, description_for, label_for, phrases
from apps.performance.narration import speech_lang, summary_text
from apps.performance.normalizer import PLACEHOLDER, TABLE_KEYS, resolve, summary_fields
from apps.performance.services import DashboardAPIError, MalformedResponseError, PerformanceResult
from apps.performance.state import (
    COMPARATIVE,
    DISTRICTS,
    PERFORMANCE,
    RequestFailed,
    RequestSucceeded,
    reduce,
    start,
)
from apps.performance.trends import build_trend, chart_geometry

logger = logging.getLogger(__name__)

# Columns rendered as plain text rather than numeric badges
TEXT_COLUMNS = ('month', 'fin_year')


def _error_detail(error):
    return str(error) or error.__class__.__name__


def load_districts(state, client):
    state, token = start(state, DISTRICTS)
    t = phrases(state.locale)
    try:
        districts = DistrictService.get_districts(client)
    except DashboardAPIError as e:
        logger.error(f"Error fetching districts: {e}")
        message = t.districts_error.format(detail=_error_detail(e), base_url=client.base_url or '/')
        return reduce(state, RequestFailed(DISTRICTS, token, message))
    if not districts:
        logger.warning("No districts in response")
    return reduce(state, RequestSucceeded(DISTRICTS, token, tuple(districts)))


def load_performance(state, client, limit=None):
    if not state.selected:
        return state
    state, token = start(state, PERFORMANCE)
    t = phrases(state.locale)
    try:
        result = client.fetch_performance(state.selected, limit=limit)
    except MalformedResponseError as e:
        # Keep the body around so the page can show what came back
        result = PerformanceResult(raw=e.raw_text)
    except DashboardAPIError as e:
        logger.error(f"Error fetching performance for {state.selected}: {e}")
        return reduce(state, RequestFailed(PERFORMANCE, token, t.performance_error.format(detail=_error_detail(e))))
    return reduce(state, RequestSucceeded(PERFORMANCE, token, result))


def load_state_comparison(state, client):
    if not state.selected:
        return state
    state, token = start(state, COMPARATIVE)
    try:
        payload = client.fetch_state_comparison(state.selected)
    except DashboardAPIError as e:
        logger.error(f"Error fetching state comparison for {state.selected}: {e}")
        message = phrases(state.locale).comparison_error.format(detail=_error_detail(e))
        return reduce(state, RequestFailed(COMPARATIVE, token, message))
    return reduce(state, RequestSucceeded(COMPARATIVE, token, payload))


def load_district_comparison(state, client):
    if not state.selected or not state.compare_with:
        return state
    state, token = start(state, COMPARATIVE)
    try:
        payload = client.fetch_district_comparison(state.selected, state.compare_with)
    except DashboardAPIError as e:
        logger.error(f"Error comparing {state.selected} with {state.compare_with}: {e}")
        message = phrases(state.locale).comparison_error.format(detail=_error_detail(e))
        return reduce(state, RequestFailed(COMPARATIVE, token, message))
    return reduce(state, RequestSucceeded(COMPARATIVE, token, payload))


def summary_cards(record, locale):
    cards = []
    for field in summary_fields(record):
        if field.raw:
            cards.append({'label': field.key, 'value': field.value, 'description': ''})
            continue
        cards.append({
            'label': label_for(field.key, locale),
            'value': format_field(field.key, field.value),
            'description': description_for(field.key, locale),
        })
    return cards


def badge(value, key):
    """Table cell for a numeric column: text plus a css class by sign."""
    if is_placeholder(value):
        return {'text': PLACEHOLDER, 'css': 'badge'}
    num = parse_number(value)
    if num is None:
        css = 'badge'
    else:
        css = 'badge ok' if num > 0 else 'badge warn'
    text = format_currency(value) if key in CURRENCY_KEYS else format_grouped(value)
    return {'text': str(text), 'css': css}


def table_rows(records):
    rows = []
    for record in records:
        row = []
        for key in TABLE_KEYS:
            value = resolve(record, key)
            if key in TEXT_COLUMNS:
                row.append({'text': str(value), 'css': ''})
            else:
                row.append(badge(value, key))
        rows.append(row)
    return rows


def recent_months(records):
    keys = ('month', 'fin_year', 'state_name', 'district_name')
    return [
        ' • '.join(str(v) for v in (resolve(r, k) for k in keys) if v)
        for r in records
    ]


def performance_context(result, locale, selected=''):
    """Everything the page needs to render one performance result."""
    if result is None:
        return {}
    if result.raw is not None:
        return {'raw': result.raw}
    if result.is_empty:
        return {'empty': True, 'source': result.source, 'note': result.note}

    records = result.records
    trend = build_trend(records)
    t = phrases(locale)
    return {
        'source': result.source,
        'note': result.note,
        'cards': summary_cards(result.latest, locale),
        'recent': recent_months(records),
        'headers': [label_for(key, locale) for key in TABLE_KEYS],
        'rows': table_rows(records),
        'trend': trend,
        'trend_title': t.trend_title.format(count=len(trend)) if trend else '',
        'chart': chart_geometry(trend) if trend else None,
        'speech_text': summary_text(result.latest, locale, fallback_district=selected),
        'speech_lang': speech_lang(locale),
    }


def dashboard_context(state):
    locale = state.locale
    comparison = None
    if state.comparative.data is not None:
        comparison = comparatives.present(state.comparative.data, locale)

    return {
        'state': state,
        't': phrases(locale),
        'lang': locale.value,
        'locales': [l.value for l in Locale],
        'district_names': state.district_names,
        'perf': performance_context(state.performance.data, locale, state.selected),
        'comparison': comparison,
        'glossary': GLOSSARY[locale],
    }
