"""
Application configuration.

Everything comes from environment variables, with defaults that suit the
local Vite dev server.
"""

import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Config:
    """Configuration for the API process."""

    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    # Upper bound on investments compared in one request
    max_investments: int = 20

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        origins = os.getenv("INVESTCALC_CORS_ORIGINS")
        return cls(
            cors_origins=_split(origins) if origins else list(DEFAULT_CORS_ORIGINS),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            max_investments=int(os.getenv("INVESTCALC_MAX_INVESTMENTS", "20")),
        )
