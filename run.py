"""Entry point for the User Directory API.

Loads environment variables from a ``.env`` file in the current
directory (if present), then serves the FastAPI application with
uvicorn.  Host and port come from ``HOST`` and ``PORT``; the defaults
are ``0.0.0.0`` and ``8080``.

Usage:
    python run.py
"""
import logging

from dotenv import load_dotenv

# Settings are read at import time, so the .env file must be loaded
# before the application package is imported.
load_dotenv()

from uvicorn import Config, Server  # noqa: E402

from user_directory.app.core.config import settings  # noqa: E402
from user_directory.app.main import app  # noqa: E402

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logger.info("Server running on http://localhost:%d (bound to %s)", settings.port, settings.host)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
