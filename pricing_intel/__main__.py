"""Serve the dashboard API: python -m pricing_intel"""

import logging

import uvicorn

from pricing_intel.utils.config import config


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("pricing_intel")
    logger.info(f"🚀 Starting {config.PROJECT_NAME} on {config.API_BASE_URL}")

    uvicorn.run(
        "pricing_intel.api.app:create_app",
        factory=True,
        host=config.API_HOST,
        port=config.API_PORT,
        reload=config.DEBUG and config.ENV == "development",
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
