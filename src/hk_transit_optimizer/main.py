"""Main entry point for the transit order optimizer server."""

import asyncio
import logging
import sys

import aiohttp
import uvicorn

from hk_transit_optimizer.adapters.config import AppConfig
from hk_transit_optimizer.adapters.web import create_app
from hk_transit_optimizer.composition import build_services

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    if not config.mtr_gtfs_url and not config.mtr_gtfs_path:
        logger.warning("No MTR GTFS feed configured, rail candidates are disabled")

    async with aiohttp.ClientSession() as session:
        try:
            services = build_services(config, session)
        except (ValueError, FileNotFoundError) as e:
            logger.error(f"Invalid configuration: {e}")
            sys.exit(1)

        app = create_app(
            services.itinerary_service,
            rate_limit_per_minute=config.rate_limit_per_minute,
        )
        server = uvicorn.Server(
            uvicorn.Config(app, host=config.host, port=config.port, log_level="info")
        )
        logger.info(f"Server listening on {config.host}:{config.port}")
        try:
            await server.serve()
        except KeyboardInterrupt:
            logger.info("Shutting down...")


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
