"""
Centralized configuration management for the Splynx geo-sync job.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from splynx_geo.core.config import settings

    # Access configuration
    print(settings.SPLYNX_BASE_URL)
    print(settings.NOMINATIM_GEOCODER_DELAY)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # project root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


# Bounding boxes for optional result validation, keyed by ISO country code.
# min_lng > max_lng means the box crosses the antimeridian.
COUNTRY_BOUNDS = {
    "nz": {
        "min_lat": -53.0,  # subantarctic islands
        "max_lat": -29.0,  # Kermadec Islands
        "min_lng": 165.5,
        "max_lng": -175.5,  # Chatham Islands
    },
}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Splynx API (Basic auth)
    # ==========================================================================
    SPLYNX_BASE_URL: str = field(
        default_factory=lambda: os.getenv("SPLYNX_BASE_URL", "")
    )
    SPLYNX_API_KEY: str = field(
        default_factory=lambda: os.getenv("SPLYNX_API_KEY", "")
    )
    SPLYNX_API_SECRET: str = field(
        default_factory=lambda: os.getenv("SPLYNX_API_SECRET", "")
    )

    # ==========================================================================
    # API Keys
    # ==========================================================================
    GOOGLE_GEOCODING_API_KEY: str = field(
        default_factory=lambda: os.getenv("GOOGLE_GEOCODING_API_KEY", "")
    )

    # ==========================================================================
    # Storage Paths
    # ==========================================================================
    DATA_DIR: Path = field(
        default_factory=lambda: Path(os.getenv("DATA_DIR", "."))
    )
    OUTPUT_CSV_NAME: str = field(
        default_factory=lambda: os.getenv("OUTPUT_CSV", "splynx_customers_geo_data.csv")
    )

    @property
    def OUTPUT_CSV(self) -> Path:
        return self.DATA_DIR / self.OUTPUT_CSV_NAME

    # ==========================================================================
    # HTTP
    # ==========================================================================
    REQUEST_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "30"))
    )
    SPLYNX_USER_AGENT: str = "Splynx-API-Client"

    # ==========================================================================
    # Geocoding
    # ==========================================================================
    NOMINATIM_USER_AGENT: str = field(
        default_factory=lambda: os.getenv(
            "NOMINATIM_USER_AGENT",
            "Splynx-API-Client/1.0 (ops@example.com)"
        )
    )
    NOMINATIM_GEOCODER_DELAY: float = field(
        default_factory=lambda: float(os.getenv("NOMINATIM_GEOCODER_DELAY", "1.0"))
    )
    GEOCODING_COUNTRY: str = field(
        default_factory=lambda: os.getenv("GEOCODING_COUNTRY", "nz").lower()
    )
    VALIDATE_BOUNDS: bool = field(
        default_factory=lambda: os.getenv("VALIDATE_BOUNDS", "false").lower() == "true"
    )

    @property
    def REGION_BOUNDS(self) -> Optional[dict]:
        """Bounding box of GEOCODING_COUNTRY, None if no box is known."""
        return COUNTRY_BOUNDS.get(self.GEOCODING_COUNTRY)

    def validate_google_geocoding(self) -> bool:
        """Check if Google Geocoding API key is configured."""
        return bool(self.GOOGLE_GEOCODING_API_KEY)


# Singleton settings instance
settings = Settings()
