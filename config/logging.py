"""
Logging setup for the Streamlit entry point.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging.

    Streamlit re-executes the script on every interaction; basicConfig is a
    no-op once the root logger has handlers, so only the level is refreshed.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
