"""
Logging configuration for the product selector.
"""
import os
import logging
from datetime import datetime
import threading

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()

DEFAULT_LOG_DIR = os.environ.get("PRODUCT_SELECTOR_LOG_DIR", "logs")


def setup_logging(log_level=logging.INFO, log_dir=DEFAULT_LOG_DIR):
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (default: INFO)
        log_dir: Directory for log files (default: PRODUCT_SELECTOR_LOG_DIR or "logs")

    Returns:
        logging.Logger: Configured logger
    """
    global _logging_initialized

    with _logging_lock:
        if _logging_initialized:
            logger = logging.getLogger()
            logger.setLevel(log_level)
            return logger

        os.makedirs(log_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"product_selector_{timestamp}.log")

        logger = logging.getLogger()
        logger.setLevel(log_level)

        # Clear any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        logger.info(f"Logging initialized. Log file: {log_file}")

        _logging_initialized = True

        return logger


def get_logger(name):
    """
    Get a logger for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if not _logging_initialized:
        setup_logging()

    return logging.getLogger(name)
