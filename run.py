"""Entry point for the event creation form service.

Serves ``event_form.app.main:app`` with uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (see
``event_form/app/core/config.py``); the remote events API is configured
through ``EVENTS_API_BASE_URL`` and friends.

Usage:
    python run.py
"""
import logging

from uvicorn import Config, Server

from event_form.app.core.config import settings
from event_form.app.core.logging_config import setup_logging


def main() -> None:
    """Serve the form application until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(
        app="event_form.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving on %s:%d", settings.host, settings.port)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
