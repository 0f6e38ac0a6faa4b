"""Structured logging for the app.

Modules log through ``structlog.get_logger(__name__)``; this only wires the
processors once per Streamlit process. Every event is one JSON line on
stdout, tagged with the app name so it can be told apart from Streamlit's
own log lines.
"""
import logging
import sys

import structlog

APP_NAME = "booking-hub"


def _add_app_name(logger, method_name, event_dict):
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def setup_structured_logging(log_level: str = "INFO"):
    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            _add_app_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Streamlit reruns the script on every interaction; force replaces the
    # handler instead of stacking a new one each time
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )
