"""Main entry point for the rail planner web server."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from rail_planner.adapters.config import AppConfig
from rail_planner.adapters.web import StarletteWebAdapter
from rail_planner.bootstrap import build_application, configure_logging

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    configure_logging()
    try:
        config = AppConfig()
        config.load_toml_overrides()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    configure_logging(config.log_level)

    app = build_application(config)
    try:
        try:
            route_count = app.route_loader.reload()
        except FileNotFoundError as e:
            logger.error(f"Cannot load routes: {e}")
            logger.error("Set ROUTES_CSV to the rail network CSV export.")
            sys.exit(1)

        if route_count == 0:
            logger.warning(f"No routes loaded from {config.routes_csv}; searches will be empty")
        else:
            logger.info(f"Loaded {route_count} route(s) from {config.routes_csv}")

        display_adapter = StarletteWebAdapter(
            app.search_service,
            app.booking_service,
            config,
            route_loader=app.route_loader,
        )
        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()
    finally:
        app.close()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
