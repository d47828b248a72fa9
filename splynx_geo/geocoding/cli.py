#!/usr/bin/env python3
"""
Command-line interface for the geocoding module.

Usage:
    python -m splynx_geo.geocoding.cli --address "123 Main Street, Auckland"
    python -m splynx_geo.geocoding.cli --address "123 Main Street, Auckland" --provider google
    python -m splynx_geo.geocoding.cli --address "123 Main Street, Auckland" --provider auto
    python -m splynx_geo.geocoding.cli --compare "123 Main Street, Auckland"
"""

import argparse
import logging
import sys

from splynx_geo.geocoding import build_orchestrator, compare_providers, get_geocoder
from splynx_geo.geocoding.base import GeocodingError

logger = logging.getLogger(__name__)


def geocode_single_address(
    address: str,
    provider: str = "nominatim",
    verbose: bool = False
) -> bool:
    """Geocode a single address and print the result."""
    print(f"\nGeocoding: {address}")
    print(f"Provider: {provider}")
    print("-" * 50)

    try:
        if provider == "auto":
            result = build_orchestrator().resolve(address)
        else:
            result = get_geocoder(provider).geocode(address)
    except GeocodingError as e:
        print(f"✗ {e}")
        return False

    if result:
        print("✓ Success!")
        print(f"  Latitude:  {result.latitude:.6f}")
        print(f"  Longitude: {result.longitude:.6f}")
        print(f"  Marker:    {result.coordinate.as_marker()}")
        print(f"  Matched:   {result.matched_address}")
        print(f"  Provider:  {result.provider}")
        print(f"  Confidence: {result.confidence:.2f}")
        print(f"  Match Type: {result.match_type}")
        if verbose and result.raw_response:
            print(f"  Raw Response: {result.raw_response}")
        return True

    print("✗ No match found")
    return False


def compare_address(address: str) -> None:
    """Compare geocoding results from the configured providers."""
    print(f"\nComparing providers for: {address}")
    print("=" * 60)

    results = compare_providers(address)

    for provider, result in results.items():
        print(f"\n{provider.upper()}:")
        if result:
            print(f"  Lat/Lng: {result.latitude:.6f}, {result.longitude:.6f}")
            print(f"  Matched: {result.matched_address}")
            print(f"  Confidence: {result.confidence:.2f}")
        else:
            print("  No match")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Geocoding CLI for Splynx service addresses"
    )

    parser.add_argument(
        "--address", "-a",
        type=str,
        help="Geocode a single address"
    )
    parser.add_argument(
        "--provider", "-p",
        type=str,
        default="nominatim",
        choices=["nominatim", "google", "auto"],
        help="Geocoding provider to use (auto = Nominatim with Google fallback)"
    )
    parser.add_argument(
        "--compare", "-c",
        type=str,
        help="Compare all providers for an address"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.compare:
        compare_address(args.compare)
    elif args.address:
        if not geocode_single_address(args.address, args.provider, args.verbose):
            return 1
    else:
        parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
