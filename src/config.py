"""Environment-driven configuration for the Sureba service."""

import os

from dotenv import load_dotenv

load_dotenv()


class SurebaConfig:
    """Central configuration, read once at import time."""

    SERVICE_NAME = "sureba"
    VERSION = "0.3.0"
    HOST = os.getenv("SUREBA_HOST", "0.0.0.0")
    PORT = int(os.getenv("SUREBA_PORT", 8000))

    # Sudachi dictionary edition: small, core or full
    SUDACHI_DICT = os.getenv("SUREBA_SUDACHI_DICT", "full")
    # A=short, B=middle, C=long units
    SPLIT_MODE = os.getenv("SUREBA_SPLIT_MODE", "C").upper()


config = SurebaConfig()
