"""
Shared utility functions for the Splynx geo-sync job.

Modules:
- address: Street/town normalization and canonical address composition
- geo: Coordinate type, marker parsing and bounds checking

Usage:
    from splynx_geo.core.utils import canonicalize, parse_marker

    canonical = canonicalize("12 queen st", "auckland", None, None)
    coord = parse_marker("-36.8485,174.7633")
"""

from splynx_geo.core.utils.address import (
    CanonicalAddress,
    canonicalize,
    compose_address,
    title_case_words,
)
from splynx_geo.core.utils.geo import (
    NOT_AVAILABLE,
    Coordinate,
    format_degrees,
    is_within_bounds,
    parse_marker,
)

__all__ = [
    # Address utilities
    "CanonicalAddress",
    "canonicalize",
    "compose_address",
    "title_case_words",
    # Geo utilities
    "NOT_AVAILABLE",
    "Coordinate",
    "format_degrees",
    "is_within_bounds",
    "parse_marker",
]
