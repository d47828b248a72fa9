"""
Coordinate helpers: marker parsing/formatting and bounding box validation.

Splynx stores a service's map pin as a "latitude,longitude" string. This
module converts between that marker text and `Coordinate` values.

Usage:
    from splynx_geo.core.utils.geo import parse_marker, is_within_bounds

    coord = parse_marker("-36.84850, 174.7633")
    coord.latitude_text   # "-36.84850" (stored text, trimmed)
    coord.as_marker()     # "-36.8485,174.7633"
    is_within_bounds(coord.latitude, coord.longitude)  # True (New Zealand)
"""

import math
from dataclasses import dataclass, field
from typing import Optional

# Placeholder written to the CSV for anything unresolved
NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class Coordinate:
    """
    A latitude/longitude pair in decimal degrees.

    Coordinates parsed from a stored marker keep the original text of each
    part, so they are reported exactly as Splynx holds them.
    """

    latitude: float
    longitude: float
    source_latitude: Optional[str] = field(default=None, compare=False, repr=False)
    source_longitude: Optional[str] = field(default=None, compare=False, repr=False)

    @property
    def latitude_text(self) -> str:
        return self.source_latitude or format_degrees(self.latitude)

    @property
    def longitude_text(self) -> str:
        return self.source_longitude or format_degrees(self.longitude)

    def as_marker(self) -> str:
        """Format as a Splynx geo marker string."""
        return f"{format_degrees(self.latitude)},{format_degrees(self.longitude)}"


def format_degrees(value: float) -> str:
    """Shortest text form of a degree value ("-36.8485", not "-36.848500")."""
    return repr(float(value))


def parse_marker(marker: Optional[str]) -> Optional[Coordinate]:
    """
    Parse a stored "lat,lon" marker.

    Args:
        marker: Marker text from Splynx (None allowed)

    Returns:
        Coordinate, or None if the marker is empty or malformed

    Example:
        >>> parse_marker("-36.8485,174.7633")
        Coordinate(latitude=-36.8485, longitude=174.7633)
        >>> parse_marker("not a marker")
        None
    """
    if not marker:
        return None

    parts = [part.strip() for part in marker.split(',')]
    if len(parts) != 2:
        return None

    try:
        lat = float(parts[0])
        lng = float(parts[1])
    except ValueError:
        return None

    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None

    return Coordinate(lat, lng, source_latitude=parts[0], source_longitude=parts[1])


def is_within_bounds(
    lat: float,
    lng: float,
    bounds: Optional[dict] = None
) -> bool:
    """
    Check if coordinates are within a bounding box.

    A box whose min_lng is greater than its max_lng crosses the
    antimeridian (e.g. New Zealand including the Chatham Islands).

    Args:
        lat: Latitude to check
        lng: Longitude to check
        bounds: Dictionary with min_lat, max_lat, min_lng, max_lng
                If None, uses the configured region bounds

    Returns:
        True if coordinates are within bounds

    Example:
        >>> is_within_bounds(-36.8485, 174.7633)  # Auckland
        True
        >>> is_within_bounds(-43.954, -176.559)  # Chatham Islands
        True
        >>> is_within_bounds(40.71, -74.01)  # NYC
        False
    """
    if bounds is None:
        from splynx_geo.core.config import settings
        bounds = settings.REGION_BOUNDS
        if bounds is None:
            return True

    if not bounds["min_lat"] <= lat <= bounds["max_lat"]:
        return False

    if bounds["min_lng"] <= bounds["max_lng"]:
        return bounds["min_lng"] <= lng <= bounds["max_lng"]
    return lng >= bounds["min_lng"] or lng <= bounds["max_lng"]
