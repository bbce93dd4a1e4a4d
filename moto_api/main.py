"""Server entry point."""

import logging
import sys

import uvicorn

from moto_api.app import create_app
from moto_api.settings import ConfigurationError, load_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


def main() -> None:
    """Validate the environment, then serve the app with uvicorn.

    Exits with status 1, before anything is served, when the environment
    is incomplete.
    """
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error("Startup aborted: %s", e)
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)
    webapp_config = settings.webapp_config()
    app = create_app(
        webapp_config=webapp_config,
        data_layer_config=settings.data_layer_config(),
    )

    logger.info("Application is running on: http://localhost:%s", webapp_config.port)
    logger.info("API docs available at: http://localhost:%s%s", webapp_config.port, webapp_config.docs_url)
    uvicorn.run(
        app,
        host=webapp_config.host,
        port=webapp_config.port,
        log_level=settings.log_level.lower(),
    )
