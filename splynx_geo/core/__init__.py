"""
Core module providing shared configuration and utilities.

This module consolidates common functionality used across the codebase:
- Configuration management (settings, environment variables)
- Utility functions (address canonicalization, coordinates)

Usage:
    from splynx_geo.core import settings
    from splynx_geo.core.utils import canonicalize, parse_marker
"""

from splynx_geo.core.config import settings, Settings

__all__ = [
    "settings",
    "Settings",
]
