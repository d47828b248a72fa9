"""
Geocoding provider implementations.
"""

from splynx_geo.geocoding.providers.google import GoogleGeocoder
from splynx_geo.geocoding.providers.nominatim import NominatimGeocoder

__all__ = ["GoogleGeocoder", "NominatimGeocoder"]
