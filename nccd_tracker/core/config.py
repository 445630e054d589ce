"""
Service configuration.
Values are read from the environment (and an optional .env file) at import time.
"""

import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

# DEBUG and SIMULATED_LATENCY_ENABLED are read on each call, see debug_enabled()
# and latency_enabled()

# Simulated analysis latency (milliseconds)
EXTRACT_BASE_DELAY_MS = int(os.getenv("EXTRACT_BASE_DELAY_MS", "1500"))
EXTRACT_PER_FILE_DELAY_MS = int(os.getenv("EXTRACT_PER_FILE_DELAY_MS", "500"))
EXTRACT_MAX_DELAY_MS = int(os.getenv("EXTRACT_MAX_DELAY_MS", "4000"))
LINK_DELAY_MS = int(os.getenv("LINK_DELAY_MS", "2000"))
SUMMARY_DELAY_MS = int(os.getenv("SUMMARY_DELAY_MS", "1500"))

# Link scorer seed; unset means a fresh random sequence per process
LINK_SEED = os.getenv("LINK_SEED")

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://127.0.0.1:3000"
)

# Version string
VERSION = "0.1.0"


def debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.getenv("DEBUG", "false").lower() == "true"


def latency_enabled() -> bool:
    """Check if simulated processing delays are enabled."""
    return os.getenv("SIMULATED_LATENCY_ENABLED", "true").lower() == "true"


def get_link_seed() -> Optional[int]:
    """Seed for the default link scorer, or None when unset."""
    seed = os.getenv("LINK_SEED", LINK_SEED)
    if seed is None or not seed.strip():
        return None
    return int(seed)


def get_cors_origins() -> List[str]:
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]
