"""Entry point for the Customer API.

Starts the FastAPI application with Uvicorn.  Host, port, database
location and log level are read from environment variables (see
``customer_api.app.core.config``); a ``.env`` file is not read.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
