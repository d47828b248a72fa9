"""
Shared fixtures: stub geocoders, an in-memory Splynx backend and record factories.

Nothing here touches the network.
"""

from typing import Dict, List, Optional

import pytest

from splynx_geo.geocoding.base import BaseGeocoder, GeocodingResult
from splynx_geo.splynx.client import SplynxApiError
from splynx_geo.splynx.models import (
    AttributesPatch,
    Customer,
    GeoPatch,
    GeoWriteResult,
    ServiceRecord,
)


class StubGeocoder(BaseGeocoder):
    """Returns (or raises) queued outcomes and records every address asked for."""

    def __init__(self, name: str, outcomes=None, has_api_key: bool = True):
        super().__init__(validate_bounds=False)
        self._name = name
        self.outcomes = list(outcomes or [])
        self.calls: List[str] = []
        self.has_api_key = has_api_key

    @property
    def provider_name(self) -> str:
        return self._name

    def geocode(self, address: str, **kwargs) -> Optional[GeocodingResult]:
        self.calls.append(address)
        outcome = self.outcomes.pop(0) if self.outcomes else None
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeBackend:
    """In-memory stand-in for SplynxBackend."""

    def __init__(
        self,
        customers: Optional[List[Customer]] = None,
        services: Optional[Dict[str, Optional[List[ServiceRecord]]]] = None,
        tariffs: Optional[Dict[str, str]] = None,
        routers: Optional[Dict[str, str]] = None,
        fail_listing: bool = False,
        fail_writes: bool = False,
    ):
        self.customers = customers or []
        self.services = services or {}
        self.tariffs = tariffs or {}
        self.routers = routers or {}
        self.fail_listing = fail_listing
        self.fail_writes = fail_writes
        self.attribute_writes: List[tuple] = []
        self.geo_writes: List[tuple] = []

    def list_active_customers(self) -> List[Customer]:
        if self.fail_listing:
            raise SplynxApiError("Failed to retrieve customer data.")
        return list(self.customers)

    def list_services(self, customer_id: str) -> Optional[List[ServiceRecord]]:
        return self.services.get(customer_id)

    def get_tariff_title(self, tariff_id):
        return self.tariffs.get(tariff_id)

    def get_router_title(self, router_id):
        return self.routers.get(router_id)

    def update_service_attributes(self, service: ServiceRecord, patch: AttributesPatch) -> bool:
        self.attribute_writes.append((service.id, patch))
        return not self.fail_writes

    def update_service_geo(self, service: ServiceRecord, patch: GeoPatch) -> GeoWriteResult:
        self.geo_writes.append((service.id, patch))
        return GeoWriteResult(cleared=not self.fail_writes, updated=not self.fail_writes)


def make_result(lat: float, lng: float, provider: str = "nominatim") -> GeocodingResult:
    return GeocodingResult(latitude=lat, longitude=lng, provider=provider)


def make_customer(**overrides) -> Customer:
    data = dict(
        id="1",
        name="Jane Smith",
        login="jsmith",
        email="jane@example.co.nz",
        status="active",
        street="123 main street",
        city="auckland",
    )
    data.update(overrides)
    return Customer(**data)


def make_service(**overrides) -> ServiceRecord:
    data = dict(
        id="100",
        customer_id="1",
        status="active",
        tariff_id="7",
        router_id="3",
        ipv4="10.0.0.5",
        install_street=None,
        install_town=None,
        geo_address=None,
        geo_marker=None,
    )
    data.update(overrides)
    return ServiceRecord(**data)


@pytest.fixture
def stub_geocoder():
    """Factory for StubGeocoder instances."""
    return StubGeocoder


@pytest.fixture
def fake_backend():
    """Factory for FakeBackend instances."""
    return FakeBackend


@pytest.fixture
def result():
    return make_result


@pytest.fixture
def customer():
    return make_customer


@pytest.fixture
def service():
    return make_service
