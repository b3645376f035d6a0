"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  When running through
``run.py`` a ``.env`` file in the project root is loaded first, so
values placed there behave exactly like exported variables.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Bind address and port for uvicorn.  The port follows the common
    # ``PORT`` convention used by container platforms.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` keeps the API open to any origin; a deployment
    # serving a single front end should list that origin instead.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list of origins."""
        origins = [origin.strip() for origin in self.cors_origins.split(",")]
        return [origin for origin in origins if origin] or ["*"]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
