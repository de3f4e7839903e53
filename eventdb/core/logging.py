import logging
import sys

from eventdb.core.config import settings


def setup_logging(level: str | None = None):
    """Configure application logging"""

    logger = logging.getLogger()
    logger.setLevel(level or settings.LOG_LEVEL)

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    # SQL statements are only interesting when explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.SQL_ECHO else logging.WARNING
    )
    logging.getLogger("alembic").setLevel(logging.INFO)
