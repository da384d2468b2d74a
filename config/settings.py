"""Runtime configuration for the plant disease detection client.

Only parameters that the current codebase uses are kept.
• PLANT_API_URL          – base URL of the inference/treatment service.
• PLANT_API_TIMEOUT_SEC  – per-request timeout for calls to that service.
• PLANT_DEFAULT_LOCALE   – language code used until the UI picks another one.
• PLANT_MAX_WORKERS      – size of the background request pool.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present (shared with other config modules)
load_dotenv()


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for runtime parameters."""

    # --- Remote service ---------------------------------------------------
    api_url: str = os.getenv("PLANT_API_URL", "http://localhost:5000")
    request_timeout_sec: float = float(os.getenv("PLANT_API_TIMEOUT_SEC", "30"))

    # --- Session ----------------------------------------------------------
    default_locale: str = os.getenv("PLANT_DEFAULT_LOCALE", "en")
    max_workers: int = int(os.getenv("PLANT_MAX_WORKERS", "3"))

    def __post_init__(self):
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))


# Singleton used by most callers
SETTINGS = AppSettings()

