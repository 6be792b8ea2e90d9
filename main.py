import logging
import sys

import uvicorn

from backoffice.config import (
    BACKOFFICE_HOST,
    BACKOFFICE_PORT,
    LOG_LEVEL,
    MONGODB_URI,
    configure_logging,
)

configure_logging(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


if __name__ == "__main__":
    if not MONGODB_URI:
        logger.error(
            "MONGODB_URI is not configured. Set it in the environment or in a .env file."
        )
        sys.exit(1)

    logger.info(f"Backoffice server starting on http://{BACKOFFICE_HOST}:{BACKOFFICE_PORT}")
    uvicorn.run("server:app", host=BACKOFFICE_HOST, port=BACKOFFICE_PORT)
