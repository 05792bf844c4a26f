"""Entry point for the lifestyle and history service.

Starts the FastAPI application with Uvicorn.  Host, port and log
level come from the ``HOST``, ``PORT`` and ``LOG_LEVEL`` environment
variables (see ``lifestyle_history_api.app.core.config``).

Usage:
    python run.py
"""
from uvicorn import Config, Server

from lifestyle_history_api.app.core.config import settings
from lifestyle_history_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
