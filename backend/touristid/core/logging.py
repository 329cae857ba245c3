import logging
import sys
from logging.handlers import RotatingFileHandler

from touristid.core.config import settings

def setup_logging(level: str = None, log_file: str = None):
    """Configure application logging"""
    level = (level or settings.LOG_LEVEL).upper()
    log_file = settings.LOG_FILE if log_file is None else log_file

    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    file_handler = None
    file_error = None
    if log_file:
        try:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10485760,  # 10MB
                backupCount=5
            )
            file_handler.setLevel(level)
        except OSError as e:
            file_error = e

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    if file_handler:
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if file_error:
        logger.warning(f"File logging disabled ({log_file}): {file_error}")

    # Silence noisy libraries
    logging.getLogger('uvicorn').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
