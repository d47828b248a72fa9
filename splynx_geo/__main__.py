"""
Entry point for ``python -m splynx_geo``; runs the geo-sync.
"""

import sys

from splynx_geo.reconcile.cli import main

if __name__ == "__main__":
    sys.exit(main())
