"""
Tests for splynx_geo.geocoding.facade.GeocodingOrchestrator.

Covers:
- primary first, secondary only on primary failure
- secondary disabled for the whole run after REQUEST_DENIED
- secondary disabled from the start when no key is configured
- non-auth secondary errors do not trip the breaker
- primary pacing timestamp still advances when the secondary resolves
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from splynx_geo.geocoding.base import GeocodingAuthError, GeocodingError
from splynx_geo.geocoding.facade import GeocodingOrchestrator, get_geocoder
from splynx_geo.geocoding.providers.google import GoogleGeocoder
from splynx_geo.geocoding.providers.nominatim import NominatimGeocoder
from splynx_geo.geocoding.rate_limit import RateLimiter

ADDRESS = "123 Main Street, Auckland"


def test_primary_result_skips_secondary(stub_geocoder, result) -> None:
    primary = stub_geocoder("nominatim", [result(-36.8, 174.7)])
    secondary = stub_geocoder("google")
    orchestrator = GeocodingOrchestrator(primary, secondary)

    resolved = orchestrator.resolve(ADDRESS)

    assert resolved.provider == "nominatim"
    assert primary.calls == [ADDRESS]
    assert secondary.calls == []


def test_secondary_used_when_primary_has_no_result(stub_geocoder, result) -> None:
    primary = stub_geocoder("nominatim", [None])
    secondary = stub_geocoder("google", [result(-36.9, 174.8, "google")])
    orchestrator = GeocodingOrchestrator(primary, secondary)

    resolved = orchestrator.resolve(ADDRESS)

    assert resolved.provider == "google"
    assert primary.calls == [ADDRESS]
    assert secondary.calls == [ADDRESS]


def test_primary_error_falls_back_without_retry(stub_geocoder, result) -> None:
    primary = stub_geocoder("nominatim", [GeocodingError("boom", provider="nominatim")])
    secondary = stub_geocoder("google", [result(-36.9, 174.8, "google")])
    orchestrator = GeocodingOrchestrator(primary, secondary)

    assert orchestrator.resolve(ADDRESS).provider == "google"
    assert len(primary.calls) == 1


def test_neither_resolves(stub_geocoder) -> None:
    orchestrator = GeocodingOrchestrator(stub_geocoder("nominatim"), stub_geocoder("google"))
    assert orchestrator.resolve(ADDRESS) is None


def test_empty_address_makes_no_calls(stub_geocoder) -> None:
    primary, secondary = stub_geocoder("nominatim"), stub_geocoder("google")
    orchestrator = GeocodingOrchestrator(primary, secondary)

    assert orchestrator.resolve("") is None
    assert primary.calls == [] and secondary.calls == []


def test_request_denied_disables_secondary_for_the_run(stub_geocoder, caplog) -> None:
    primary = stub_geocoder("nominatim")
    secondary = stub_geocoder("google", [GeocodingAuthError("Request denied", provider="google")])
    orchestrator = GeocodingOrchestrator(primary, secondary)

    with caplog.at_level(logging.WARNING):
        assert orchestrator.resolve(ADDRESS) is None
        assert orchestrator.secondary_enabled is False
        assert orchestrator.resolve("1 Other Road, Hamilton") is None
        assert orchestrator.resolve("2 Third Street, Napier") is None

    assert secondary.calls == [ADDRESS]
    assert len(primary.calls) == 3
    disabled = [r for r in caplog.records if "Disabling google" in r.getMessage()]
    assert len(disabled) == 1


def test_missing_key_disables_secondary_at_construction(stub_geocoder, caplog) -> None:
    secondary = stub_geocoder("google", has_api_key=False)

    with caplog.at_level(logging.WARNING):
        orchestrator = GeocodingOrchestrator(stub_geocoder("nominatim"), secondary)
        for _ in range(3):
            assert orchestrator.resolve(ADDRESS) is None

    assert orchestrator.secondary_enabled is False
    assert secondary.calls == []
    disabled = [r for r in caplog.records if "Disabling google" in r.getMessage()]
    assert len(disabled) == 1


def test_no_secondary_at_all(stub_geocoder) -> None:
    orchestrator = GeocodingOrchestrator(stub_geocoder("nominatim"))
    assert orchestrator.secondary_enabled is False
    assert orchestrator.resolve(ADDRESS) is None


def test_quota_error_does_not_trip_breaker(stub_geocoder, result) -> None:
    secondary = stub_geocoder(
        "google",
        [GeocodingError("Google API quota exceeded", provider="google"), result(-36.9, 174.8, "google")],
    )
    orchestrator = GeocodingOrchestrator(stub_geocoder("nominatim"), secondary)

    assert orchestrator.resolve(ADDRESS) is None
    assert orchestrator.secondary_enabled is True
    assert orchestrator.resolve(ADDRESS).provider == "google"


def test_primary_pacing_updates_when_secondary_resolves(stub_geocoder, result) -> None:
    """Real Nominatim client (mocked HTTP) returning nothing, Google stub resolving."""
    limiter = RateLimiter(1.0, clock=MagicMock(return_value=50.0), sleep=MagicMock())
    primary = NominatimGeocoder(rate_limiter=limiter, validate_bounds=False)
    secondary = stub_geocoder("google", [result(-36.9, 174.8, "google")])
    orchestrator = GeocodingOrchestrator(primary, secondary)

    empty = MagicMock(status_code=200)
    empty.json.return_value = []
    with patch("splynx_geo.geocoding.providers.nominatim.requests.get", return_value=empty):
        resolved = orchestrator.resolve(ADDRESS)

    assert resolved.provider == "google"
    assert limiter.last_request == 50.0


def test_real_google_without_key_is_disabled() -> None:
    orchestrator = GeocodingOrchestrator(
        NominatimGeocoder(rate_limiter=MagicMock()),
        GoogleGeocoder(api_key=""),
    )
    assert orchestrator.secondary_enabled is False


def test_get_geocoder() -> None:
    assert isinstance(get_geocoder("nominatim"), NominatimGeocoder)
    assert isinstance(get_geocoder("google"), GoogleGeocoder)
    with pytest.raises(ValueError):
        get_geocoder("bing")
