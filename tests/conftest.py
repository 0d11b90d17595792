from __future__ import annotations

import json
from typing import Callable
from urllib.parse import urlparse

import pytest
import requests
from django.core.cache import cache

BACKEND = "http://backend.test"


class DummyResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str | None = None, reason: str = ""):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason or ("OK" if status_code < 400 else "Error")
        self.text = text if text is not None else json.dumps(payload)

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} {self.reason}")


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def backend_settings(settings):
    settings.MGNREGA_API_BASE_URL = BACKEND
    settings.MGNREGA_DEFAULT_STATE = "Maharashtra"
    settings.MGNREGA_PERFORMANCE_LIMIT = 12
    settings.MGNREGA_GEOCODER_URL = "https://geocoder.test/reverse"
    return settings


@pytest.fixture
def fake_backend(monkeypatch) -> Callable[..., list]:
    """Route ``requests.get`` by URL path to canned responses.

    Each route value is either a ``DummyResponse``, an exception instance to
    raise, or a callable taking the params dict. Returns the call log.
    """

    def _install(routes: dict) -> list:
        calls = []

        def fake_get(url, params=None, timeout=None, headers=None):
            path = urlparse(url).path
            calls.append((path, dict(params or {})))
            route = routes.get(path)
            if route is None:
                return DummyResponse({"error": "not found"}, status_code=404, reason="Not Found")
            if isinstance(route, Exception):
                raise route
            if callable(route):
                return route(params or {})
            return route

        monkeypatch.setattr(requests, "get", fake_get)
        return calls

    return _install


@pytest.fixture
def districts_payload() -> list:
    return [
        {"id": 1, "name": "Pune"},
        {"id": 2, "name": "Nagpur"},
        {"id": 3, "name": "Nashik"},
    ]


@pytest.fixture
def performance_payload() -> dict:
    return {
        "source": "api",
        "records": [
            {
                "fin_year": "2024-2025",
                "month": "Mar",
                "state_name": "MAHARASHTRA",
                "district_name": "PUNE",
                "Total_Households_Worked": "12,500",
                "persondays_generated": 250000,
                "noOfOngoingWorks": 1500,
                "Number_of_Completed_Works": 320,
                "Average_Wage_rate_per_day_per_person": 256.5,
                "total_wages": "12000000",
            },
            {
                "fin_year": "2024-2025",
                "month": "Feb",
                "persondays_generated": 0,
                "households_worked": 9000,
            },
            {
                "fin_year": "2024-2025",
                "month": "Jan",
                "Persondays_of_Central_Liability_so_far": "150000",
                "households_worked": 8000,
            },
        ],
    }
