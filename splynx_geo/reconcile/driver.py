"""
Reconciliation driver: walks active customers and their active services,
applies the update decisions and writes one CSV row per service.

Pipeline per service:
1. Canonicalize the install address (customer address as fallback)
2. Decide the write-backs, geocoding if needed
3. Write attributes and geo back to Splynx (best-effort, independently)
4. Emit the CSV row

Records are processed strictly one at a time, in listing order, because the
Nominatim rate limiter is a single shared resource.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from splynx_geo.core.utils.address import canonicalize
from splynx_geo.core.utils.geo import NOT_AVAILABLE
from splynx_geo.geocoding.facade import GeocodingOrchestrator
from splynx_geo.reconcile.decision import UpdateDecision, decide
from splynx_geo.reconcile.export import CsvExporter
from splynx_geo.splynx.backend import SplynxBackend
from splynx_geo.splynx.models import Customer, ServiceRecord

logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    """Counters for one reconciliation run."""
    customers: int = 0
    skipped_customers: int = 0
    services: int = 0
    rows: int = 0
    attributes_updated: int = 0
    geo_updated: int = 0
    geocoded: int = 0
    unresolved: int = 0
    write_failures: int = 0
    errors: int = 0


class Reconciler:
    """
    Runs the geo-sync for every active service of every active customer.

    Usage:
        reconciler = Reconciler(backend, build_orchestrator(), CsvExporter("out.csv"))
        stats = reconciler.run()
    """

    PROGRESS_STEP = 5  # percent

    def __init__(
        self,
        backend: SplynxBackend,
        geocoder: GeocodingOrchestrator,
        exporter: CsvExporter,
        dry_run: bool = False,
        limit: Optional[int] = None,
    ):
        self.backend = backend
        self.geocoder = geocoder
        self.exporter = exporter
        self.dry_run = dry_run
        self.limit = limit
        self.stats = RunStats()

    def run(self) -> RunStats:
        """
        Process all active customers.

        Raises:
            SplynxApiError: If the customer listing cannot be retrieved
        """
        logger.info("Retrieving all active customers...")
        customers = self.backend.list_active_customers()

        with self.exporter:
            if not customers:
                logger.info("No active customers found.")
                return self.stats

            if self.limit:
                customers = customers[:self.limit]
                logger.info(f"Limited to {self.limit} customers")

            total = len(customers)
            logger.info(f"Found {total} active customers.")
            next_threshold = self.PROGRESS_STEP

            for index, customer in enumerate(customers, start=1):
                self.stats.customers += 1
                self.process_customer(customer)

                progress = (index * 100) // total
                if progress >= next_threshold:
                    logger.info(f"Processing: {progress}% complete...")
                    next_threshold = progress + self.PROGRESS_STEP

        self.log_summary()
        return self.stats

    def process_customer(self, customer: Customer) -> None:
        """Process every active service of one customer."""
        try:
            services = self.backend.list_services(customer.id)
        except Exception as e:
            logger.exception(f"Error listing services of customer {customer.id}: {e}")
            services = None

        if services is None:
            logger.warning(f"Skipping customer {customer.id}: could not list services")
            self.stats.skipped_customers += 1
            return

        for service in services:
            if not service.is_active:
                continue

            self.stats.services += 1
            try:
                row = self.process_service(customer, service)
            except Exception as e:
                logger.exception(f"Error processing service {service.id} of customer {customer.id}: {e}")
                self.stats.errors += 1
                row = self.build_row(customer, service)

            self.exporter.write_row(row)
            self.stats.rows += 1

    def process_service(self, customer: Customer, service: ServiceRecord) -> Dict[str, str]:
        """Reconcile one service and return its CSV row."""
        canonical = canonicalize(
            service.install_street,
            service.install_town,
            customer.street,
            customer.city,
        )
        decision = decide(service, canonical, self.geocoder)

        if decision.geocoded:
            self.stats.geocoded += 1
        if not decision.resolved:
            self.stats.unresolved += 1

        self.apply(service, decision)

        return self.build_row(customer, service, decision)

    def apply(self, service: ServiceRecord, decision: UpdateDecision) -> None:
        """Send the decided write-backs; failures are counted, never raised."""
        if self.dry_run:
            if decision.attributes:
                logger.info(f"  Would update attributes of service {service.id}: {decision.attributes}")
            if decision.geo:
                logger.info(f"  Would update geo of service {service.id}: {decision.geo}")
            return

        if decision.attributes:
            if self.backend.update_service_attributes(service, decision.attributes):
                self.stats.attributes_updated += 1
            else:
                self.stats.write_failures += 1

        if decision.geo:
            result = self.backend.update_service_geo(service, decision.geo)
            if result.ok:
                self.stats.geo_updated += 1
            else:
                self.stats.write_failures += 1

    def build_row(
        self,
        customer: Customer,
        service: ServiceRecord,
        decision: Optional[UpdateDecision] = None,
    ) -> Dict[str, str]:
        """CSV row for a service; without a decision the address fields are N/A."""
        row = {
            'Customer ID': customer.id,
            'Name': customer.name,
            'Login': customer.login,
            'Email': customer.email,
            'Status': customer.status,
            'Internet Plan Name': NOT_AVAILABLE,
            'Internet Plan Status': service.status,
            'IPv4': service.ipv4,
            'Router': NOT_AVAILABLE,
            'Street': NOT_AVAILABLE,
            'Town': NOT_AVAILABLE,
            'Latitude': NOT_AVAILABLE,
            'Longitude': NOT_AVAILABLE,
        }

        if decision is None:
            return row

        row['Internet Plan Name'] = self.backend.get_tariff_title(service.tariff_id) or NOT_AVAILABLE
        row['Router'] = self.backend.get_router_title(service.router_id) or NOT_AVAILABLE
        row['Street'] = decision.canonical.street
        row['Town'] = decision.canonical.town
        row['Latitude'] = decision.latitude
        row['Longitude'] = decision.longitude
        return row

    def log_summary(self) -> None:
        stats = self.stats
        logger.info("=" * 60)
        logger.info("GEO SYNC COMPLETE")
        logger.info("=" * 60)
        logger.info(f"Customers processed:   {stats.customers}")
        logger.info(f"Customers skipped:     {stats.skipped_customers}")
        logger.info(f"Active services:       {stats.services}")
        logger.info(f"Rows written:          {stats.rows}")
        logger.info(f"Geocoding attempts:    {stats.geocoded}")
        logger.info(f"Unresolved locations:  {stats.unresolved}")
        if not self.dry_run:
            logger.info(f"Attribute updates:     {stats.attributes_updated}")
            logger.info(f"Geo updates:           {stats.geo_updated}")
            logger.info(f"Write failures:        {stats.write_failures}")
        else:
            logger.info("DRY RUN - no updates made")
        logger.info(f"Errors:                {stats.errors}")
