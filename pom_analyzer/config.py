"""
Configuration for the POM dependency analyzer
Values come from the environment (optionally a .env file); CLI options override them.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

load_dotenv()


def parse_max_depth(value: Optional[str]) -> Optional[int]:
    """Blank or missing means unlimited"""
    if value is None or value.strip() == "":
        return None
    try:
        depth = int(value)
    except ValueError:
        raise ConfigurationError(f"POM_ANALYZER_MAX_DEPTH must be an integer, got {value!r}")
    if depth < 0:
        raise ConfigurationError(f"POM_ANALYZER_MAX_DEPTH must not be negative, got {depth}")
    return depth


class Config:
    """Configuration for scanning, filtering and rendering"""
    # Scanning
    POM_FILENAME = "pom.xml"

    # Filtering
    DEFAULT_FILTER = os.getenv("POM_ANALYZER_FILTER", "True")

    # Logging
    LOG_LEVEL = os.getenv("POM_ANALYZER_LOG_LEVEL", "WARNING").upper()

    # DOT output
    NODE_ID_PREFIX = "label"
    CYCLE_EDGE_COLOR = "red"
    CYCLE_EDGE_PENWIDTH = 2

    @staticmethod
    def max_depth() -> Optional[int]:
        """POM_ANALYZER_MAX_DEPTH, read when asked so a bad value surfaces as ConfigurationError"""
        return parse_max_depth(os.getenv("POM_ANALYZER_MAX_DEPTH"))
