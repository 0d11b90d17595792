from io import StringIO

import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError

from conftest import DummyResponse


def _run(*args, **options) -> str:
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


def test_fetch_all_districts(fake_backend, districts_payload):
    fake_backend({"/api/districts": DummyResponse(districts_payload)})

    output = _run("fetch_all_districts", search="na")

    assert "Found 2 of 3 districts" in output
    assert "Nagpur (ID: 2)" in output
    assert "Pune" not in output


def test_fetch_all_districts_limit(fake_backend, districts_payload):
    fake_backend({"/api/districts": DummyResponse(districts_payload)})
    output = _run("fetch_all_districts", limit=1)
    assert "showing first 1 only" in output


def test_fetch_all_districts_failure(fake_backend):
    fake_backend({"/api/districts": requests.ConnectionError("refused")})
    with pytest.raises(CommandError):
        _run("fetch_all_districts")


def test_check_data_health(fake_backend, districts_payload, performance_payload):
    fake_backend({
        "/api/districts": DummyResponse(districts_payload),
        "/api/performance": DummyResponse(performance_payload),
        "/api/comparatives/state-average": DummyResponse({"error": "No data available"}),
        "/api/comparatives/district-comparison": DummyResponse({
            "district1": {"name": "Pune", "persondaysGenerated": 1},
            "district2": {"name": "Nagpur", "persondaysGenerated": 2},
        }),
    })

    output = _run("check_data_health")

    assert "Total Districts: 3" in output
    assert "/api/performance: 3 records from api" in output
    assert "/api/comparatives/state-average: error" in output
    assert "/api/comparatives/district-comparison: district_comparison" in output
    assert "Health check complete" in output


def test_check_data_health_reports_failures(fake_backend):
    fake_backend({"/api/districts": DummyResponse({}, status_code=500)})
    output = _run("check_data_health", district="Pune")

    assert "✗ /api/districts" in output
    assert "endpoint(s) failed" in output


def test_show_performance(fake_backend, performance_payload):
    fake_backend({"/api/performance": DummyResponse(performance_payload)})

    output = _run("show_performance", "Pune")

    assert "Persondays Generated: 2.50 Lakh" in output
    assert "Total Wages: ₹1.20 Cr" in output
    assert "Jan/2024-2025: 1,50,000" in output
    assert "Average: 2,00,000 days" in output
    assert "Source: api" in output


def test_show_performance_hindi_empty(fake_backend):
    fake_backend({"/api/performance": DummyResponse({"records": []})})
    output = _run("show_performance", "Pune", lang="hi")
    assert "कोई डेटा नहीं मिला" in output


def test_show_performance_failure(fake_backend):
    fake_backend({"/api/performance": DummyResponse({}, status_code=502)})
    with pytest.raises(CommandError, match="Failed to fetch performance"):
        _run("show_performance", "Pune")
