"""
Geocoding facade: provider factory and the primary/secondary orchestrator.
"""

import logging
from typing import Optional, List, Dict, Literal

from splynx_geo.geocoding.base import (
    BaseGeocoder,
    GeocodingAuthError,
    GeocodingError,
    GeocodingResult,
)
from splynx_geo.geocoding.providers.google import GoogleGeocoder
from splynx_geo.geocoding.providers.nominatim import NominatimGeocoder

logger = logging.getLogger(__name__)

ProviderType = Literal["nominatim", "google"]


def get_geocoder(provider: ProviderType = "nominatim") -> BaseGeocoder:
    """
    Get a geocoder instance by provider name.

    Args:
        provider: Provider name ("nominatim", "google")

    Returns:
        Geocoder instance
    """
    providers = {
        "nominatim": NominatimGeocoder,
        "google": GoogleGeocoder,
    }

    if provider not in providers:
        raise ValueError(f"Unknown provider: {provider}. Choose from: {list(providers.keys())}")

    return providers[provider]()


class GeocodingOrchestrator:
    """
    Resolves an address through the primary provider, falling back to the
    secondary one.

    The secondary provider is treated as a circuit: once it reports an
    authorization failure (or has no key to begin with) it is never called
    again for the lifetime of this orchestrator. Build one orchestrator per
    run and pass it to every record.

    Usage:
        orchestrator = GeocodingOrchestrator(NominatimGeocoder(), GoogleGeocoder())
        result = orchestrator.resolve("123 Main Street, Auckland")
    """

    def __init__(self, primary: BaseGeocoder, secondary: Optional[BaseGeocoder] = None):
        self.primary = primary
        self.secondary = secondary
        self._secondary_valid = True

        if secondary is None:
            self._secondary_valid = False
        elif not getattr(secondary, "has_api_key", True):
            self._disable_secondary(f"{secondary.provider_name} API key is not configured")

    @property
    def secondary_enabled(self) -> bool:
        return self._secondary_valid

    def _disable_secondary(self, reason: str) -> None:
        if not self._secondary_valid:
            return
        self._secondary_valid = False
        logger.warning(f"{reason}. Disabling {self.secondary.provider_name} geocoding for this run.")

    def resolve(self, address: str) -> Optional[GeocodingResult]:
        """
        Geocode an address with fallback.

        Args:
            address: Canonical single-line address

        Returns:
            GeocodingResult from the first provider that resolves, or None
        """
        if not address:
            return None

        try:
            result = self.primary.geocode(address)
        except GeocodingError as e:
            logger.warning(f"{self.primary.provider_name} failed for {address}: {e.message}")
            result = None

        if result:
            return result

        if not self._secondary_valid:
            logger.debug(f"Skipping secondary geocoder for {address}")
            return None

        logger.debug(f"Trying fallback provider: {self.secondary.provider_name}")
        try:
            return self.secondary.geocode(address)
        except GeocodingAuthError as e:
            self._disable_secondary(f"{self.secondary.provider_name} key appears to be invalid ({e.message})")
        except GeocodingError as e:
            logger.warning(f"{self.secondary.provider_name} failed for {address}: {e.message}")
        return None


def build_orchestrator() -> GeocodingOrchestrator:
    """Create the run-scoped orchestrator from settings (Nominatim, then Google)."""
    return GeocodingOrchestrator(NominatimGeocoder(), GoogleGeocoder())


def compare_providers(
    address: str,
    providers: Optional[List[str]] = None,
) -> Dict[str, Optional[GeocodingResult]]:
    """
    Compare geocoding results from multiple providers.

    Useful for checking why a service resolved where it did.

    Args:
        address: Address to geocode
        providers: List of providers to compare (default: all configured)

    Returns:
        Dict mapping provider name to result
    """
    if providers is None:
        providers = ["nominatim"]
        # Only add Google if API key is configured
        from splynx_geo.core import settings
        if settings.validate_google_geocoding():
            providers.append("google")

    results = {}
    for provider in providers:
        geocoder = get_geocoder(provider)
        try:
            results[provider] = geocoder.geocode(address)
        except GeocodingError as e:
            logger.warning(f"{provider}: {e.message}")
            results[provider] = None

    return results
