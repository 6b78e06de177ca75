"""Application entry point."""

import logging
import uvicorn

from leaderboard_service.config import Config
from leaderboard_service.app import create_app


def main():
    """Run the application."""
    config = Config.from_env()

    # Configure logging
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = create_app(config)

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
    )


if __name__ == "__main__":
    main()
