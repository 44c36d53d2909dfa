"""
Runtime configuration.

Constants of the game itself live next to the code that uses them (see src/checkers/position.py).
Settings that may differ per deployment are read from the environment (a .env file is picked up as well).
"""

import os
import sys

from dotenv import load_dotenv
from loguru import logger

# Load environment configuration
load_dotenv()

LOG_LEVEL = os.getenv("CHECKERS_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Replace loguru's default handler with one at the configured level."""
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.debug(f"Logging configured at level {level}")
