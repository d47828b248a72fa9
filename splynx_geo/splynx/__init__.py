"""
Splynx backend access: REST client, record snapshots and write-back calls.
"""

from splynx_geo.splynx.client import SplynxApiError, SplynxClient, get_splynx_client
from splynx_geo.splynx.backend import Endpoints, SplynxBackend
from splynx_geo.splynx.models import (
    AttributesPatch,
    Customer,
    GeoPatch,
    GeoWriteResult,
    ServiceRecord,
)

__all__ = [
    "SplynxApiError",
    "SplynxClient",
    "get_splynx_client",
    "Endpoints",
    "SplynxBackend",
    "AttributesPatch",
    "Customer",
    "GeoPatch",
    "GeoWriteResult",
    "ServiceRecord",
]
