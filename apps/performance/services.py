import requests
import logging
from dataclasses import dataclass, field
from urllib.parse import urljoin
from django.conf import settings

logger = logging.getLogger(__name__)


class DashboardAPIError(Exception):
    """Base class for failures talking to the backend API"""


class APIRequestError(DashboardAPIError):
    """Transport failure or non-success HTTP status"""

    def __init__(self, message, status_code=None, url=None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class MalformedResponseError(DashboardAPIError):
    """Response body could not be decoded as JSON"""

    def __init__(self, message, raw_text='', url=None):
        super().__init__(message)
        self.raw_text = raw_text
        self.url = url


def resolve_api_base_url(override=None, debug=None, origin=''):
    """Pick the backend base URL.

    Priority: explicit override, then the serving origin in production,
    then the fixed local backend in development.
    """
    if override:
        return override.rstrip('/')
    if debug is None:
        debug = settings.DEBUG
    if not debug:
        return (origin or '').rstrip('/')
    return settings.MGNREGA_DEV_API_BASE_URL.rstrip('/')


@dataclass(frozen=True)
class PerformanceResult:
    records: tuple = ()
    source: str = None
    note: str = None
    raw: str = None

    @property
    def is_empty(self):
        return not self.records

    @property
    def latest(self):
        return self.records[0] if self.records else None

    @classmethod
    def from_payload(cls, payload):
        if not isinstance(payload, dict):
            return cls()
        records = payload.get('records') or []
        if not isinstance(records, list):
            records = []
        return cls(
            records=tuple(r for r in records if isinstance(r, dict)),
            source=payload.get('source'),
            note=payload.get('note'),
        )


@dataclass(frozen=True)
class District:
    id: object
    name: str

    @classmethod
    def from_payload(cls, item):
        if not isinstance(item, dict) or not item.get('name'):
            return None
        return cls(id=item.get('id'), name=str(item['name']))


@dataclass
class DashboardAPIClient:
    """Thin client for the backend's districts, performance and comparatives endpoints"""

    base_url: str = None
    timeout: int = None
    session: object = field(default=None, repr=False)

    def __post_init__(self):
        if self.base_url is None:
            self.base_url = resolve_api_base_url(settings.MGNREGA_API_BASE_URL)
        if self.timeout is None:
            self.timeout = settings.MGNREGA_API_TIMEOUT

    @classmethod
    def for_request(cls, request):
        """Client whose relative base URL falls back to the request's own origin"""
        origin = request.build_absolute_uri('/') if request is not None else ''
        return cls(base_url=resolve_api_base_url(settings.MGNREGA_API_BASE_URL, origin=origin))

    def url(self, path):
        if not self.base_url:
            return path
        return urljoin(self.base_url + '/', path.lstrip('/'))

    def _get(self, path, params=None):
        url = self.url(path)
        getter = self.session.get if self.session is not None else requests.get

        logger.info(f"Fetching {url} with params: {params}")
        try:
            response = getter(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise APIRequestError(str(e), url=url) from e

        logger.info(f"Response from {url}: {response.status_code}")
        if not 200 <= response.status_code < 300:
            reason = getattr(response, 'reason', '') or ''
            raise APIRequestError(
                f"{response.status_code} {reason}".strip(),
                status_code=response.status_code,
                url=url,
            )

        text = response.text
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Failed to parse JSON from {url}: {text[:200]}")
            raise MalformedResponseError(str(e), raw_text=text, url=url) from e

    def fetch_districts(self):
        data = self._get('/api/districts')
        if not isinstance(data, list):
            logger.warning(f"Unexpected districts payload: {type(data).__name__}")
            return []
        districts = [d for d in (District.from_payload(item) for item in data) if d]
        logger.info(f"Fetched {len(districts)} districts")
        return districts

    def fetch_performance(self, district, state=None, limit=None):
        params = {
            'state': state or settings.MGNREGA_DEFAULT_STATE,
            'district': district,
            'limit': str(limit or settings.MGNREGA_PERFORMANCE_LIMIT),
        }
        result = PerformanceResult.from_payload(self._get('/api/performance', params))
        if result.is_empty:
            logger.warning(f"No records in performance response for {district}")
        else:
            logger.info(f"Fetched {len(result.records)} records for {district} from {result.source or 'unknown'}")
        return result

    def fetch_state_comparison(self, district, state=None):
        params = {'state': state or settings.MGNREGA_DEFAULT_STATE, 'district': district}
        return self._get('/api/comparatives/state-average', params)

    def fetch_district_comparison(self, district1, district2, state=None):
        params = {
            'state': state or settings.MGNREGA_DEFAULT_STATE,
            'district1': district1,
            'district2': district2,
        }
        return self._get('/api/comparatives/district-comparison', params)
