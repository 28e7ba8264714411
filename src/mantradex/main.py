"""Main entry point - runs the API server."""

import logging

import uvicorn

from mantradex.api.app import create_app
from mantradex.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # Configure logging
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info("Starting mantradex...")
    logger.info(f"Environment: {settings.environment}, default network: {settings.default_network}")
    if not settings.has_wallet:
        logger.warning("WALLET_MNEMONIC not set - swaps disabled")

    uvicorn.run(
        create_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
