"""
Reconciliation of Splynx service addresses and geo markers.

Usage:
    from splynx_geo.reconcile import Reconciler, CsvExporter

    reconciler = Reconciler(backend, orchestrator, CsvExporter("geo.csv"))
    stats = reconciler.run()
"""

from splynx_geo.reconcile.decision import UpdateDecision, attributes_patch, decide
from splynx_geo.reconcile.driver import Reconciler, RunStats
from splynx_geo.reconcile.export import CSV_COLUMNS, CsvExporter

__all__ = [
    "UpdateDecision",
    "attributes_patch",
    "decide",
    "Reconciler",
    "RunStats",
    "CSV_COLUMNS",
    "CsvExporter",
]
