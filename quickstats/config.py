"""Service settings, read once from the environment at import time."""
from __future__ import annotations

import os

from quickstats import __version__

LOG_LEVEL = os.environ.get("QUICKSTATS_LOG_LEVEL", "INFO").upper()  # e.g. DEBUG, INFO, WARNING
SERVICE_TITLE = os.environ.get("QUICKSTATS_SERVICE_TITLE", "Quickstats Analysis Service")
SERVICE_VERSION = os.environ.get("QUICKSTATS_SERVICE_VERSION", __version__)
METRICS_PREFIX = os.environ.get("QUICKSTATS_METRICS_PREFIX", "quickstats")  # Prefix for Prometheus metric names
