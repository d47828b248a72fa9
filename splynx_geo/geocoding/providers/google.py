"""
Google Geocoding API provider.

Paid, accurate geocoding service. Fallback provider for the geo-sync.
https://developers.google.com/maps/documentation/geocoding
"""

import logging
from typing import Optional

import requests

from splynx_geo.core import settings
from splynx_geo.geocoding.base import (
    BaseGeocoder,
    GeocodingAuthError,
    GeocodingError,
    GeocodingResult,
)

logger = logging.getLogger(__name__)

GOOGLE_GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class GoogleGeocoder(BaseGeocoder):
    """
    Google Geocoding API provider.

    Pros:
    - Very accurate
    - Good address normalization

    Cons:
    - Requires API key
    - Paid service (~$5 per 1000 requests)

    A `REQUEST_DENIED` response raises `GeocodingAuthError` so the caller can
    stop using the key; every other failure is reported as "no result".

    Usage:
        geocoder = GoogleGeocoder()  # Uses GOOGLE_GEOCODING_API_KEY from env
        result = geocoder.geocode("123 Main Street, Auckland")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        country: Optional[str] = None,
        validate_bounds: Optional[bool] = None,
        bounds: Optional[dict] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Google Geocoder.

        Args:
            api_key: Google API key (uses settings if not provided)
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
        self.api_key = api_key if api_key is not None else settings.GOOGLE_GEOCODING_API_KEY

    @property
    def provider_name(self) -> str:
        return "google"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def geocode(self, address: str, **kwargs) -> Optional[GeocodingResult]:
        """
        Geocode an address using Google Geocoding API.

        Args:
            address: Single-line address

        Returns:
            GeocodingResult if successful, None if not found or on error

        Raises:
            GeocodingAuthError: Key missing or request denied
            GeocodingError: Quota exceeded
        """
        if not self.api_key:
            raise GeocodingAuthError(
                "GOOGLE_GEOCODING_API_KEY not configured",
                provider=self.provider_name,
                address=address
            )

        params = {
            "address": address,
            "key": self.api_key,
            "components": f"country:{self.country}",
        }

        try:
            response = requests.get(GOOGLE_GEOCODING_URL, params=params, timeout=self.timeout)
            data = response.json()
        except requests.Timeout:
            logger.warning(f"Google: Timeout for {address}")
            return None
        except requests.RequestException as e:
            logger.error(f"Google: Request to {GOOGLE_GEOCODING_URL} failed for {address}: {e}")
            return None
        except ValueError:
            logger.warning(
                f"Google: Malformed response (HTTP {response.status_code}) for {address}"
            )
            return None

        if not isinstance(data, dict):
            logger.warning(f"Google: Unexpected payload for {address}")
            return None

        status = data.get("status")
        if status != "OK":
            error_message = data.get("error_message", "Unknown error")
            if status == "ZERO_RESULTS":
                logger.debug(f"Google: No results for {address}")
                return None
            elif status == "REQUEST_DENIED":
                raise GeocodingAuthError(
                    f"Request denied: {error_message}",
                    provider=self.provider_name,
                    address=address
                )
            elif status == "OVER_QUERY_LIMIT":
                raise GeocodingError(
                    "Google API quota exceeded",
                    provider=self.provider_name,
                    address=address
                )
            else:
                logger.warning(
                    f"Google API error {status} (HTTP {response.status_code}): {error_message}"
                )
                return None

        # Get first result
        try:
            result = data["results"][0]
            location = result["geometry"]["location"]
            lat = float(location["lat"])
            lng = float(location["lng"])
        except (KeyError, IndexError, TypeError, ValueError):
            logger.warning(f"Google: Result without geometry for {address}")
            return None

        location_type = result.get("geometry", {}).get("location_type", "")
        geocoded = GeocodingResult(
            latitude=lat,
            longitude=lng,
            matched_address=result.get("formatted_address", ""),
            confidence=1.0 if location_type == "ROOFTOP" else 0.8,
            provider=self.provider_name,
            match_type=location_type,
            raw_response=result,
        )

        if not self.validate_result(geocoded):
            logger.warning(
                f"Google: Coordinates outside region for {address}: "
                f"{lat}, {lng}"
            )
            return None

        return geocoded
