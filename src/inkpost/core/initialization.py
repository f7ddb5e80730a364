"""Application initialization and setup.

This module handles the initialization tasks required before the application
starts: loading environment variables and configuring logging.
"""

from dotenv import load_dotenv

from inkpost.core.config.settings import settings
from inkpost.core.logging import configure_logging


def initialize_application() -> None:
    """Initialize the application with all necessary setup tasks.

    This function performs the following initialization tasks:
    1. Load environment variables
    2. Configure logging
    """
    # Variables already set in the environment win over .env
    load_dotenv()

    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
