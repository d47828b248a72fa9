"""
Splynx backend operations used by the geo-sync.

Wraps the raw REST client with the listing, lookup and write-back calls the
reconciliation needs, translating Splynx JSON into `Customer` and
`ServiceRecord` snapshots.

Usage:
    from splynx_geo.splynx import SplynxBackend, get_splynx_client

    backend = SplynxBackend(get_splynx_client())
    for customer in backend.list_active_customers():
        services = backend.list_services(customer.id)
"""

import logging
from typing import Dict, List, Optional

from splynx_geo.splynx.client import SplynxApiError, SplynxClient
from splynx_geo.splynx.models import (
    AttributesPatch,
    Customer,
    GeoPatch,
    GeoWriteResult,
    ServiceRecord,
)

logger = logging.getLogger(__name__)


class Endpoints:
    """Splynx API paths used in the project."""
    CUSTOMERS = "admin/customers/customer"
    CUSTOMER_SERVICES = "admin/customers/customer/{customer_id}/internet-services"
    SERVICE_ATTRIBUTES = "admin/customers/customer/{customer_id}/internet-services--{service_id}"
    SERVICE_GEO = "admin/customers/customer/{customer_id}/geo-internet-service--{service_id}"
    TARIFF = "admin/tariffs/internet/{tariff_id}"
    ROUTER = "admin/networking/routers/{router_id}"


class SplynxBackend:
    """
    Listing, lookup and write-back calls against one Splynx instance.

    Tariff and router titles are cached for the lifetime of the instance;
    many services share the same plan and router.
    """

    def __init__(self, client: SplynxClient):
        self.client = client
        self._tariff_titles: Dict[str, Optional[str]] = {}
        self._router_titles: Dict[str, Optional[str]] = {}

    def list_active_customers(self) -> List[Customer]:
        """
        Fetch all customers with status "active".

        Raises:
            SplynxApiError: If the listing cannot be retrieved
        """
        data = self.client.get(
            Endpoints.CUSTOMERS,
            {"main_attributes[status]": "active"}
        )
        if data is None or not isinstance(data, list):
            raise SplynxApiError(
                "Failed to retrieve customer data. "
                "Please check your API Key, Secret, and Splynx API URL."
            )

        customers = []
        for item in data:
            if not isinstance(item, dict) or item.get("id") is None:
                logger.warning(f"Ignoring malformed customer entry: {item!r}")
                continue
            customers.append(Customer.from_api(item))
        return customers

    def list_services(self, customer_id: str) -> Optional[List[ServiceRecord]]:
        """
        Fetch every internet service of a customer.

        The status filter on this endpoint is unreliable, so all services are
        returned and callers check `ServiceRecord.is_active`.

        Returns:
            List of services, or None if the request failed
        """
        data = self.client.get(Endpoints.CUSTOMER_SERVICES.format(customer_id=customer_id))
        if data is None:
            return None
        if not isinstance(data, list):
            logger.warning(f"Unexpected services payload for customer {customer_id}")
            return None

        services = []
        for item in data:
            if not isinstance(item, dict):
                logger.warning(f"Ignoring malformed service entry for customer {customer_id}: {item!r}")
                continue
            services.append(ServiceRecord.from_api(item, customer_id))
        return services

    def _lookup_title(self, cache: Dict[str, Optional[str]], path: str, key: str) -> Optional[str]:
        if key not in cache:
            data = self.client.get(path)
            title = None
            if data and isinstance(data, dict):
                title = data.get("title")
            cache[key] = title
        return cache[key]

    def get_tariff_title(self, tariff_id: Optional[str]) -> Optional[str]:
        """Title of an internet tariff, None if unknown or the lookup failed."""
        if not tariff_id:
            return None
        return self._lookup_title(
            self._tariff_titles,
            Endpoints.TARIFF.format(tariff_id=tariff_id),
            tariff_id,
        )

    def get_router_title(self, router_id: Optional[str]) -> Optional[str]:
        """Title of a router, None if unknown or the lookup failed."""
        if not router_id:
            return None
        return self._lookup_title(
            self._router_titles,
            Endpoints.ROUTER.format(router_id=router_id),
            router_id,
        )

    def update_service_attributes(self, service: ServiceRecord, patch: AttributesPatch) -> bool:
        """Write `installstreet` / `installtown` for a service."""
        path = Endpoints.SERVICE_ATTRIBUTES.format(
            customer_id=service.customer_id,
            service_id=service.id,
        )
        ok = self.client.put(path, patch.payload())
        if ok:
            logger.debug(f"Updated attributes of service {service.id}: {patch.street!r}, {patch.town!r}")
        return ok

    def update_service_geo(self, service: ServiceRecord, patch: GeoPatch) -> GeoWriteResult:
        """
        Rewrite a service's geo block: clear it, then set the new values.

        Both steps are always attempted; a failed clear is reported but does
        not stop the set.
        """
        path = Endpoints.SERVICE_GEO.format(
            customer_id=service.customer_id,
            service_id=service.id,
        )
        clear_payload, set_payload = patch.payloads()

        cleared = self.client.put(path, clear_payload)
        if not cleared:
            logger.warning(f"Could not clear geo data of service {service.id}")

        updated = self.client.put(path, set_payload)
        if not updated:
            logger.warning(f"Could not set geo data of service {service.id}")

        return GeoWriteResult(cleared=cleared, updated=updated)
