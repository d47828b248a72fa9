"""
Base classes and interfaces for geocoding providers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any

from splynx_geo.core.config import COUNTRY_BOUNDS
from splynx_geo.core.utils.geo import Coordinate


@dataclass
class GeocodingResult:
    """Standard result from any geocoding provider."""

    latitude: float
    longitude: float
    matched_address: str = ""
    confidence: float = 1.0  # 0.0 to 1.0
    provider: str = ""
    match_type: str = ""  # e.g., "house", "ROOFTOP"
    raw_response: Optional[Dict[str, Any]] = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class GeocodingError(Exception):
    """Exception raised when geocoding fails."""

    def __init__(self, message: str, provider: str = "", address: str = ""):
        self.message = message
        self.provider = provider
        self.address = address
        super().__init__(f"[{provider}] {message}" if provider else message)


class GeocodingAuthError(GeocodingError):
    """The provider rejected our credentials (missing, invalid or denied key)."""


class BaseGeocoder(ABC):
    """
    Abstract base class for geocoding providers.

    Subclasses must implement:
    - geocode(): Geocode a single free-text address
    - provider_name: Name of the provider

    Optional overrides:
    - validate_result(): Provider-specific validation
    """

    def __init__(
        self,
        country: str = "nz",
        validate_bounds: bool = True,
        bounds: Optional[dict] = None,
        timeout: float = 30,
    ):
        self.country = country
        self.validate_bounds = validate_bounds
        self.bounds = bounds if bounds is not None else COUNTRY_BOUNDS.get(country.lower())
        self.timeout = timeout

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Name of the geocoding provider."""
        pass

    @abstractmethod
    def geocode(self, address: str, **kwargs) -> Optional[GeocodingResult]:
        """
        Geocode a single address.

        Args:
            address: Single-line address, e.g. "123 Main Street, Auckland"
            **kwargs: Provider-specific options

        Returns:
            GeocodingResult if successful, None if not found

        Raises:
            GeocodingAuthError: If the provider rejected the credentials
            GeocodingError: For other provider-level failures worth reporting
        """
        pass

    def validate_result(self, result: GeocodingResult) -> bool:
        """
        Validate a geocoding result against the configured region bounds.

        Args:
            result: GeocodingResult to validate

        Returns:
            True if result is valid (or bounds validation is disabled/unavailable)
        """
        from splynx_geo.core.utils.geo import is_within_bounds

        if not self.validate_bounds or not self.bounds:
            return True

        return is_within_bounds(result.latitude, result.longitude, self.bounds)
