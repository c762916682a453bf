"""
Quest Forge application settings.

Extends the base settings with path-generation configuration.
"""

from typing import List, Optional
from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Quest Forge-specific settings."""

    # ==========================================================================
    # Path Generation
    # ==========================================================================
    # Base URL of the service hosting the generation function
    PATH_GENERATION_BASE_URL: str = "http://localhost:8000"

    # Comma-separated candidate URLs, tried in order. Relative entries are
    # joined to PATH_GENERATION_BASE_URL.
    PATH_GENERATION_ENDPOINTS: str = (
        "/api/functions/v1/generate-learning-path,"
        "/functions/v1/generate-learning-path"
    )

    # Per-request timeout in seconds
    PATH_GENERATION_TIMEOUT: float = 60.0

    # Completion budget for the hosted generation function
    PATH_GENERATION_MAX_TOKENS: int = 2000

    # ==========================================================================
    # Mentor
    # ==========================================================================
    # Seed for the keyword mentor's random choices (unset = nondeterministic)
    MENTOR_RANDOM_SEED: Optional[int] = None

    def get_path_generation_endpoints(self) -> List[str]:
        """Resolve the candidate endpoint list to absolute URLs."""
        base = self.PATH_GENERATION_BASE_URL.rstrip("/")
        endpoints = []
        for entry in self.PATH_GENERATION_ENDPOINTS.split(","):
            entry = entry.strip()
            if not entry:
                continue
            if entry.startswith("http://") or entry.startswith("https://"):
                endpoints.append(entry)
            else:
                endpoints.append(f"{base}/{entry.lstrip('/')}")
        return endpoints


settings = Settings()
