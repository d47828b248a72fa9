"""
Snapshots of the Splynx records the geo-sync reads, and the patches it writes back.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

# Body that blanks a service geo block before it is rewritten
GEO_CLEAR_PAYLOAD = {"address": None, "marker": None}


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _block(value: Any) -> Dict[str, Any]:
    # Splynx encodes an empty object as []
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Customer:
    """An active Splynx customer."""
    id: str
    name: str = ""
    login: str = ""
    email: str = ""
    status: str = ""
    street: Optional[str] = None
    city: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Customer":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            login=data.get("login") or "",
            email=data.get("email") or "",
            status=data.get("status") or "",
            street=_text(data.get("street_1")),
            city=_text(data.get("city")),
        )


@dataclass(frozen=True)
class ServiceRecord:
    """An internet service attached to a customer, as read from Splynx."""
    id: str
    customer_id: str
    status: str = ""
    tariff_id: Optional[str] = None
    router_id: Optional[str] = None
    ipv4: str = ""
    install_street: Optional[str] = None
    install_town: Optional[str] = None
    geo_address: Optional[str] = None
    geo_marker: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == "active"

    @classmethod
    def from_api(cls, data: Dict[str, Any], customer_id: str) -> "ServiceRecord":
        attributes = _block(data.get("additional_attributes"))
        geo = _block(data.get("geo"))
        return cls(
            id=str(data.get("id", "")),
            customer_id=str(customer_id),
            status=data.get("status") or "",
            tariff_id=_text(data.get("tariff_id")),
            router_id=_text(data.get("router_id")),
            ipv4=data.get("ipv4") or "",
            install_street=_text(attributes.get("installstreet")),
            install_town=_text(attributes.get("installtown")),
            geo_address=_text(geo.get("address")),
            geo_marker=_text(geo.get("marker")),
        )


@dataclass(frozen=True)
class AttributesPatch:
    """New `installstreet` / `installtown` values, always written together."""
    street: str
    town: str

    def payload(self) -> Dict[str, Any]:
        return {
            "additional_attributes": {
                "installstreet": self.street,
                "installtown": self.town,
            }
        }


@dataclass(frozen=True)
class GeoPatch:
    """
    New geo address and marker for a service.

    Splynx does not reliably overwrite the geo block in place, so the patch is
    applied in two steps: blank out address and marker, then set the new
    values. An empty marker leaves the service without a pin.
    """
    address: str
    marker: str = ""

    def payloads(self):
        """The (clear, set) payload pair, in the order they must be sent."""
        return dict(GEO_CLEAR_PAYLOAD), {"address": self.address, "marker": self.marker}


@dataclass(frozen=True)
class GeoWriteResult:
    """Outcome of each step of a geo write-back."""
    cleared: bool
    updated: bool

    @property
    def ok(self) -> bool:
        return self.cleared and self.updated
