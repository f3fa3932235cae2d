import logging
import os
from logging.handlers import RotatingFileHandler


def setup_logging(log_file_path: str, debug: bool = False):
    # Create the directory for the log file if it doesn't exist
    os.makedirs(os.path.dirname(log_file_path), exist_ok=True)

    # Remove all existing handlers from the root logger
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    file_handler = RotatingFileHandler(log_file_path, maxBytes=10 * 1024 * 1024, backupCount=5)  # 10MB
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[file_handler],
    )

    # Silence some noisy loggers
    for name in ["asyncio", "urllib3"]:
        logging.getLogger(name).setLevel(logging.WARNING)
