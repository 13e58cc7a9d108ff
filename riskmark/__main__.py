"""
Serve the riskmark API with uvicorn.

The rule file is taken from ``RISKMARK_CONFIG``; host and port from
``RISKMARK_HOST`` / ``RISKMARK_PORT``.
"""

import logging

import uvicorn

from riskmark.config import API_HOST, API_PORT, CONFIG_PATH

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  [%(levelname)s]  %(name)s - %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("riskmark")


def main() -> None:
    logger.info("Rules    : %s", CONFIG_PATH)
    logger.info("Listening: http://%s:%d/", API_HOST, API_PORT)

    from riskmark.main import app

    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level="warning")


if __name__ == "__main__":
    main()
