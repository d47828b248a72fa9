"""
Update decisions for a single internet service.

Compares what Splynx currently stores for a service against its canonical
address and decides which write-backs are needed:

1. Attributes: `installstreet` / `installtown` are rewritten (both together)
   when either differs from the normalized value, or when the address came
   from the customer record because the service had none.
2. Geo address: rewritten when the canonical address is non-empty and differs
   from the stored geo address.
3. Geo marker: geocoded when the geo address changed or there is no usable
   stored marker (missing, or not a "lat,lon" pair of numbers, so malformed
   markers are re-geocoded). Otherwise the stored marker is reported
   exactly as stored, each part trimmed.
4. A resolved coordinate always produces a geo patch carrying the address it
   was resolved from. If nothing resolves, the stored marker is reported and
   a geo patch is only produced for a changed address.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from splynx_geo.core.utils.address import CanonicalAddress
from splynx_geo.core.utils.geo import NOT_AVAILABLE, Coordinate, parse_marker
from splynx_geo.geocoding.facade import GeocodingOrchestrator
from splynx_geo.splynx.models import AttributesPatch, GeoPatch, ServiceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateDecision:
    """What to write back for one service and which coordinate to report."""

    canonical: CanonicalAddress
    attributes: Optional[AttributesPatch] = None
    geo: Optional[GeoPatch] = None
    coordinate: Optional[Coordinate] = None
    geocoded: bool = False
    provider: str = ""

    @property
    def resolved(self) -> bool:
        return self.coordinate is not None

    @property
    def latitude(self) -> str:
        if self.coordinate is None:
            return NOT_AVAILABLE
        return self.coordinate.latitude_text

    @property
    def longitude(self) -> str:
        if self.coordinate is None:
            return NOT_AVAILABLE
        return self.coordinate.longitude_text


def attributes_patch(service: ServiceRecord, canonical: CanonicalAddress) -> Optional[AttributesPatch]:
    """Patch for the install attributes, or None if they are already canonical."""
    if (
        canonical.street != (service.install_street or "")
        or canonical.town != (service.install_town or "")
        or canonical.used_fallback
    ):
        return AttributesPatch(street=canonical.street, town=canonical.town)
    return None


def decide(
    service: ServiceRecord,
    canonical: CanonicalAddress,
    geocoder: GeocodingOrchestrator,
) -> UpdateDecision:
    """
    Decide the write-backs for a service, geocoding if needed.

    Args:
        service: Snapshot of the service as stored in Splynx
        canonical: Canonical address built for the service
        geocoder: Run-scoped orchestrator (anything with `resolve(address)`)

    Returns:
        UpdateDecision
    """
    attributes = attributes_patch(service, canonical)

    address_changed = bool(canonical.address) and service.geo_address != canonical.address
    geo_address = canonical.address if address_changed else (service.geo_address or "")
    stored = parse_marker(service.geo_marker)

    if not address_changed and stored is not None:
        return UpdateDecision(canonical=canonical, attributes=attributes, coordinate=stored)

    if service.geo_marker and stored is None:
        logger.debug(f"Service {service.id}: ignoring malformed marker {service.geo_marker!r}")

    result = None
    geocoded = False
    if geo_address:
        geocoded = True
        result = geocoder.resolve(geo_address)

    if result is not None:
        coordinate = result.coordinate
        return UpdateDecision(
            canonical=canonical,
            attributes=attributes,
            geo=GeoPatch(address=geo_address, marker=coordinate.as_marker()),
            coordinate=coordinate,
            geocoded=geocoded,
            provider=result.provider,
        )

    if geocoded:
        logger.info(f"Service {service.id}: could not geocode {geo_address!r}")

    return UpdateDecision(
        canonical=canonical,
        attributes=attributes,
        geo=GeoPatch(address=geo_address) if address_changed else None,
        coordinate=stored,
        geocoded=geocoded,
    )
