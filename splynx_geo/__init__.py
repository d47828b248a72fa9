"""
Splynx geo-sync: keeps internet-service install addresses and map markers
in Splynx up to date, and exports them to CSV.

Packages:
- ``splynx_geo.core``     : settings and address/coordinate utilities
- ``splynx_geo.geocoding``: Nominatim and Google geocoders, fallback orchestration
- ``splynx_geo.splynx``   : Splynx API client and backend operations
- ``splynx_geo.reconcile``: update decisions, CSV export, the run driver
"""

__version__ = "0.1.0"
