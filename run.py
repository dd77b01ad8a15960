"""Entry point for the Employee API.

Serves ``employee_api.app.main:app`` with Uvicorn.  Host and port are
read from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); see ``employee_api/app/core/config.py`` for
the other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


async def main() -> None:
    """Start the API server and block until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),  # already normalised by Settings
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
