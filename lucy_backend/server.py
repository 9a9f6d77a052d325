"""
Process entry point.

Validates configuration before the port is bound, then serves the app
with uvicorn. The first SIGTERM/SIGINT stops accepting connections and
waits for open streams; once ``SHUTDOWN_TIMEOUT_SECONDS`` has elapsed the
remaining connections are dropped. A second signal forces an immediate
exit with status 1.
"""
import signal
import sys

import uvicorn

from lucy_backend.core.config import get_settings
from lucy_backend.core.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


class LucyServer(uvicorn.Server):
    """uvicorn server that logs which signal triggered the shutdown."""

    def handle_exit(self, sig: int, frame) -> None:
        try:
            name = signal.Signals(sig).name
        except ValueError:
            name = str(sig)

        if self.should_exit:
            logger.warning(f"{name} received again during shutdown")
        else:
            logger.info(f"{name} received, shutting down gracefully...")

        super().handle_exit(sig, frame)


def run() -> None:
    """Start the HTTP listener; exits with status 1 on configuration errors."""
    try:
        settings = get_settings()
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_dir)

    from lucy_backend.api.main import app

    logger.info(f"Lucy AI Backend running on {settings.host}:{settings.port}")
    logger.info(f"Health: http://localhost:{settings.port}/health")

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )
    server = LucyServer(config)
    server.run()

    if server.force_exit:
        logger.error("Forced shutdown")
        sys.exit(1)

    logger.info("Server closed")


if __name__ == "__main__":
    run()
