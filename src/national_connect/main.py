"""Run the API with uvicorn."""

import logging

import uvicorn

from national_connect.api.app import create_app
from national_connect.config import Settings
from national_connect.containers import build_container

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the API on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    logger.info("National Connect API Server running on port %s", settings.port)
    logger.info("API Base URL: http://localhost:%s/api", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
