"""
Geocoding module for Splynx service addresses.

Provides a unified interface for the two geocoding providers:
- Nominatim: OpenStreetMap (free, 1 req/sec limit) - primary
- Google: Google Geocoding API (paid, accurate) - fallback

Usage:
    from splynx_geo.geocoding import NominatimGeocoder, GoogleGeocoder, GeocodingOrchestrator

    # Using specific provider
    geocoder = NominatimGeocoder()
    result = geocoder.geocode("123 Main Street, Auckland")

    # Primary with fallback, one instance per run
    orchestrator = GeocodingOrchestrator(NominatimGeocoder(), GoogleGeocoder())
    result = orchestrator.resolve("123 Main Street, Auckland")
"""

from splynx_geo.geocoding.base import (
    GeocodingResult,
    GeocodingError,
    GeocodingAuthError,
    BaseGeocoder,
)
from splynx_geo.geocoding.rate_limit import RateLimiter
from splynx_geo.geocoding.providers.google import GoogleGeocoder
from splynx_geo.geocoding.providers.nominatim import NominatimGeocoder
from splynx_geo.geocoding.facade import (
    GeocodingOrchestrator,
    build_orchestrator,
    compare_providers,
    get_geocoder,
)

__all__ = [
    # Base classes
    "GeocodingResult",
    "GeocodingError",
    "GeocodingAuthError",
    "BaseGeocoder",
    "RateLimiter",
    # Providers
    "GoogleGeocoder",
    "NominatimGeocoder",
    # Orchestration
    "GeocodingOrchestrator",
    "build_orchestrator",
    "compare_providers",
    "get_geocoder",
]
