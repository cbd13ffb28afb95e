import logging
import os

import dotenv

dotenv.load_dotenv()

LOG_LEVEL = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()
HOST = os.getenv("CATALOG_HOST", "0.0.0.0")
PORT = int(os.getenv("CATALOG_PORT", "8000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
