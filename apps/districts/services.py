import requests
import logging
from django.conf import settings
from django.core.cache import cache
from apps.performance.services import DashboardAPIClient

logger = logging.getLogger(__name__)

DISTRICTS_CACHE_KEY = 'mgnrega_districts_{base_url}'

# Reverse-geocoder address fields that may carry a district name, in order
PLACE_FIELDS = ('county', 'state_district', 'district')


class DistrictService:
    """District list lookups and geolocation-based preselection"""

    @staticmethod
    def get_districts(client=None, force_refresh=False):
        """District list from the backend, cached for DISTRICTS_CACHE_TIMEOUT"""
        client = client or DashboardAPIClient()
        cache_key = DISTRICTS_CACHE_KEY.format(base_url=client.base_url or 'same-origin')

        if not force_refresh:
            cached = cache.get(cache_key)
            if cached:
                logger.info("Returning cached district list")
                return cached

        districts = client.fetch_districts()
        if districts:
            cache.set(cache_key, districts, settings.DISTRICTS_CACHE_TIMEOUT)
        return districts

    @staticmethod
    def place_from_geocode(data):
        """District-level place name from a reverse-geocoding payload"""
        if not isinstance(data, dict):
            return ''
        address = data.get('address') or {}
        for name in PLACE_FIELDS:
            if address.get(name):
                return str(address[name])
        return ''

    @staticmethod
    def reverse_geocode(latitude, longitude):
        """Place name for a coordinate, or '' when the lookup fails"""
        params = {'format': 'jsonv2', 'lat': latitude, 'lon': longitude}
        try:
            response = requests.get(
                settings.MGNREGA_GEOCODER_URL,
                params=params,
                headers={'Accept': 'application/json'},
                timeout=settings.MGNREGA_GEOCODER_TIMEOUT,
            )
            response.raise_for_status()
            return DistrictService.place_from_geocode(response.json())
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Reverse geocoding failed for {latitude},{longitude}: {e}")
            return ''

