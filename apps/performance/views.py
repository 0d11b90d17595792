from dataclasses import asdict
from django.shortcuts import render
from django.http import JsonResponse
from apps.performance import comparatives
from apps.performance.dashboard import (
    dashboard_context,
    load_district_comparison,
    load_districts,
    load_performance,
    load_state_comparison,
)
from apps.performance.formatting import format_field
from apps.performance.locale import label_for, parse_locale
from apps.performance.normalizer import CANONICAL_KEYS, UNAVAILABLE, resolve_record
from apps.performance.services import DashboardAPIClient, DashboardAPIError, MalformedResponseError
from apps.performance.state import (
    DashboardState,
    SelectCompareDistrict,
    SelectDistrict,
    ToggleCompare,
    reduce,
)
from apps.performance.trends import build_trend
import logging

logger = logging.getLogger(__name__)


def performance_dashboard(request):
    """District picker, latest metrics, trend, records table and comparisons"""
    client = DashboardAPIClient.for_request(request)
    state = DashboardState(locale=parse_locale(request.GET.get('lang', 'en')))

    state = load_districts(state, client)

    selected_district = request.GET.get('district')
    if selected_district:
        state = reduce(state, SelectDistrict(selected_district))

    compare = request.GET.get('compare', '')
    compare_with = request.GET.get('with', '')
    if compare_with:
        state = reduce(state, SelectCompareDistrict(compare_with))
    state = reduce(state, ToggleCompare(compare == 'district'))

    if selected_district:
        state = load_performance(state, client)

    if compare == 'state':
        state = load_state_comparison(state, client)
    elif compare == 'district':
        state = load_district_comparison(state, client)

    context = dashboard_context(state)
    # Geolocation may only preselect when the user has not picked a district
    context['locate'] = not selected_district and not state.districts.error
    return render(request, 'performance/performance_dashboard.html', context)


def _serialize_record(record, locale):
    return {
        field.key: {
            'label': label_for(field.key, locale),
            'value': None if field.value is UNAVAILABLE else field.value,
            'display': format_field(field.key, field.value),
        }
        for field in resolve_record(record, CANONICAL_KEYS)
    }


def _api_error(e):
    data = {'error': str(e) or e.__class__.__name__}
    if isinstance(e, MalformedResponseError):
        data['raw'] = e.raw_text[:2000]
    return JsonResponse(data, status=502)


def district_performance(request, district_name):
    """Normalized, formatted records for one district"""
    locale = parse_locale(request.GET.get('lang', 'en'))
    client = DashboardAPIClient.for_request(request)
    try:
        result = client.fetch_performance(
            district_name,
            state=request.GET.get('state'),
            limit=request.GET.get('limit'),
        )
    except DashboardAPIError as e:
        logger.error(f"Performance lookup failed for {district_name}: {e}")
        return _api_error(e)

    trend = build_trend(result.records)
    data = {
        'district': district_name,
        'source': result.source,
        'note': result.note,
        'empty': result.is_empty,
        'records': [_serialize_record(r, locale) for r in result.records],
        'trend': None if trend is None else {
            'labels': trend.labels,
            'values': trend.values,
            'mean': trend.mean,
        },
    }
    return JsonResponse(data)


def _comparison_response(payload, locale):
    return JsonResponse({
        'kind': comparatives.classify(payload),
        'presentation': asdict(comparatives.present(payload, locale)),
        'raw': payload,
    })


def state_average_comparison(request):
    locale = parse_locale(request.GET.get('lang', 'en'))
    district = request.GET.get('district')
    if not district:
        return JsonResponse({'error': 'district is required'}, status=400)

    client = DashboardAPIClient.for_request(request)
    try:
        payload = client.fetch_state_comparison(district, state=request.GET.get('state'))
    except DashboardAPIError as e:
        logger.error(f"State comparison failed for {district}: {e}")
        return _api_error(e)
    return _comparison_response(payload, locale)


def district_comparison(request):
    locale = parse_locale(request.GET.get('lang', 'en'))
    district1 = request.GET.get('district1')
    district2 = request.GET.get('district2')
    if not district1 or not district2:
        return JsonResponse({'error': 'district1 and district2 are required'}, status=400)

    client = DashboardAPIClient.for_request(request)
    try:
        payload = client.fetch_district_comparison(district1, district2, state=request.GET.get('state'))
    except DashboardAPIError as e:
        logger.error(f"District comparison failed for {district1} vs {district2}: {e}")
        return _api_error(e)
    return _comparison_response(payload, locale)
