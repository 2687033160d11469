from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from record_dashboard.config import LOG_FORMAT_ENV

LOG_RECORD_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure root logger for the app

    Modes:
    - JSON (default)
    - plain text (local development)

    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var RECORD_DASHBOARD_LOG_FORMAT
        3) default = "json"
    """

    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    logger = logging.getLogger()
    logger.setLevel(level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(LOG_RECORD_FORMAT)
    else:
        formatter = JsonFormatter(LOG_RECORD_FORMAT)

    handler.setFormatter(formatter)

    # Streamlit reruns the script on every interaction; replace handlers instead of stacking them.
    logger.handlers.clear()
    logger.addHandler(handler)
