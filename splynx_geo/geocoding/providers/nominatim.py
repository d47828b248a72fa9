"""
Nominatim (OpenStreetMap) Geocoder provider.

Free geocoding using OpenStreetMap data. Primary provider for the geo-sync.
https://nominatim.org/
"""

import logging
from typing import Optional

import requests

from splynx_geo.core import settings
from splynx_geo.geocoding.base import BaseGeocoder, GeocodingResult
from splynx_geo.geocoding.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"


class NominatimGeocoder(BaseGeocoder):
    """
    Nominatim (OpenStreetMap) Geocoder.

    Pros:
    - Free
    - Good coverage of New Zealand street addresses
    - No API key

    Cons:
    - Strict rate limiting (1 request/second), enforced by `RateLimiter`
    - Variable accuracy
    - Requires a descriptive user agent

    Usage:
        geocoder = NominatimGeocoder()
        result = geocoder.geocode("123 Main Street, Auckland")
    """

    def __init__(
        self,
        user_agent: Optional[str] = None,
        rate_limiter: Optional[RateLimiter] = None,
        country: Optional[str] = None,
        validate_bounds: Optional[bool] = None,
        bounds: Optional[dict] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Nominatim Geocoder.

        Args:
            user_agent: User agent string (required by Nominatim TOS)
            rate_limiter: Shared pacing gate; one is created if not provided
            country: ISO country code results are restricted to
            validate_bounds: Reject results outside the region bounding box
            bounds: Bounding box override (defaults to the country's box)
            timeout: Per-request timeout in seconds
        """
        super().__init__(
            country=country or settings.GEOCODING_COUNTRY,
            validate_bounds=settings.VALIDATE_BOUNDS if validate_bounds is None else validate_bounds,
            bounds=bounds,
            timeout=timeout or settings.REQUEST_TIMEOUT,
        )
        self.user_agent = user_agent or settings.NOMINATIM_USER_AGENT
        self.rate_limiter = rate_limiter or RateLimiter(settings.NOMINATIM_GEOCODER_DELAY)

    @property
    def provider_name(self) -> str:
        return "nominatim"

    def geocode(self, address: str, **kwargs) -> Optional[GeocodingResult]:
        """
        Geocode an address using Nominatim.

        Every call waits on the rate limiter first, whatever its outcome.

        Args:
            address: Single-line address

        Returns:
            GeocodingResult if successful, None on any failure
        """
        params = {
            "q": address,
            "format": "json",
            "limit": 1,
            "countrycodes": self.country,
        }

        headers = {
            "User-Agent": self.user_agent,
            "Accept-Language": "en",
        }

        self.rate_limiter.wait()

        try:
            response = requests.get(
                NOMINATIM_URL,
                params=params,
                headers=headers,
                timeout=self.timeout
            )
        except requests.Timeout:
            logger.warning(f"Nominatim: Timeout for {address}")
            return None
        except requests.RequestException as e:
            logger.error(f"Nominatim: Request to {NOMINATIM_URL} failed for {address}: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"Nominatim: {NOMINATIM_URL} returned HTTP {response.status_code} for {address}")
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Nominatim: Malformed JSON for {address}")
            return None

        if not data or not isinstance(data, list):
            logger.debug(f"Nominatim: No results for {address}")
            return None

        # Get first result
        result = data[0]
        try:
            lat = float(result["lat"])
            lng = float(result["lon"])
        except (KeyError, TypeError, ValueError):
            logger.warning(f"Nominatim: Result without usable lat/lon for {address}")
            return None

        # Calculate confidence based on type
        osm_type = result.get("type", "")
        if osm_type in ("house", "building"):
            confidence = 0.95
        elif osm_type in ("street", "road", "residential"):
            confidence = 0.7
        else:
            confidence = 0.5

        geocoded = GeocodingResult(
            latitude=lat,
            longitude=lng,
            matched_address=result.get("display_name", ""),
            confidence=confidence,
            provider=self.provider_name,
            match_type=osm_type,
            raw_response=result,
        )

        if not self.validate_result(geocoded):
            logger.warning(
                f"Nominatim: Coordinates outside region for {address}: "
                f"{lat}, {lng}"
            )
            return None

        return geocoded
