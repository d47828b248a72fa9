"""
CSV output for reconciled services.

The header is written once when the exporter is opened; each row is appended
as soon as its service has been processed, so a run that is killed part way
still leaves a valid file.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

import pandas as pd

logger = logging.getLogger(__name__)

CSV_COLUMNS: List[str] = [
    'Customer ID', 'Name', 'Login', 'Email', 'Status',
    'Internet Plan Name', 'Internet Plan Status',
    'IPv4', 'Router', 'Street', 'Town', 'Latitude', 'Longitude',
]


class CsvExporter:
    """Streams rows to a CSV file with a fixed header."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.rows_written = 0
        self._opened = False

    def open(self) -> "CsvExporter":
        """Create (or truncate) the file and write the header row."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(columns=CSV_COLUMNS).to_csv(self.path, index=False)
        self._opened = True
        self.rows_written = 0
        logger.info(f"CSV file '{self.path}' created with header row.")
        return self

    def write_row(self, row: Dict[str, str]) -> None:
        """Append one row; missing columns are written empty."""
        if not self._opened:
            self.open()

        values = [row.get(column, "") for column in CSV_COLUMNS]
        pd.DataFrame([values], columns=CSV_COLUMNS).to_csv(
            self.path, mode='a', header=False, index=False
        )
        self.rows_written += 1

    def __enter__(self) -> "CsvExporter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        logger.info(f"Wrote {self.rows_written} rows to '{self.path}'")
