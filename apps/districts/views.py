from django.shortcuts import render
from django.http import JsonResponse
from apps.districts.services import DistrictService
from apps.performance.dashboard import load_districts
from apps.performance.locale import parse_locale, phrases
from apps.performance.services import DashboardAPIClient, DashboardAPIError
from apps.performance.state import DashboardState, SuggestDistrict, reduce
import logging

logger = logging.getLogger(__name__)


def district_list(request):
    """District picker; the first district is preselected"""
    locale = parse_locale(request.GET.get('lang', 'en'))
    client = DashboardAPIClient.for_request(request)
    state = load_districts(DashboardState(locale=locale), client)

    search = request.GET.get('q', '').strip().lower()
    districts = state.districts.data or ()
    if search:
        districts = [d for d in districts if search in d.name.lower()]

    logger.info(f"Total districts: {len(state.district_names)}, shown: {len(districts)}")

    context = {
        'state': state,
        't': phrases(locale),
        'lang': locale.value,
        'districts': districts,
        'search': search,
        'total_districts': len(state.district_names),
    }
    return render(request, 'districts/district_list.html', context)


def district_list_api(request):
    client = DashboardAPIClient.for_request(request)
    try:
        districts = DistrictService.get_districts(client, force_refresh=request.GET.get('refresh') == '1')
    except DashboardAPIError as e:
        logger.error(f"Error fetching districts: {e}")
        return JsonResponse({'error': str(e)}, status=502)
    return JsonResponse([{'id': d.id, 'name': d.name} for d in districts], safe=False)


def suggest_district(request):
    """Best-effort district preselection from browser coordinates"""
    try:
        latitude = float(request.GET['lat'])
        longitude = float(request.GET['lon'])
    except (KeyError, ValueError):
        return JsonResponse({'error': 'lat and lon are required numbers'}, status=400)

    client = DashboardAPIClient.for_request(request)
    state = load_districts(DashboardState(), client)
    if state.districts.error:
        return JsonResponse({'district': None})

    place = DistrictService.reverse_geocode(latitude, longitude)
    suggested = reduce(state, SuggestDistrict(place))
    district = suggested.selected if suggested is not state else None
    return JsonResponse({'district': district, 'place': place or None})
