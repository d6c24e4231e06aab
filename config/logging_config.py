# config/logging_config.py
import logging
import sys

from config import settings

def configure_logger(level=None, stream=None):
    """Configures a basic logger; stdout by default, stderr when stdout carries data."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger()
    logger.setLevel(str(level or settings.LOG_LEVEL).upper())

    # Avoid adding handlers multiple times (streamlit reruns the script)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter(log_format))
        logger.addHandler(handler)
