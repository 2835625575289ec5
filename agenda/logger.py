import logging
import sys

from agenda.settings import settings


logging_formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s")

logging_handler = logging.StreamHandler(sys.stdout)
logging_handler.setFormatter(logging_formatter)


def get_logger(name: str) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    logger.setLevel(settings.log_level)
    if logging_handler not in logger.handlers:
        logger.addHandler(logging_handler)
    return logger
