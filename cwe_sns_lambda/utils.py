"""
Logging helpers shared by the cweSns mutator and the CDK app
"""

import json
import logging
import os
from typing import Any


# Configure structured logging
def setup_logger(name: str) -> logging.Logger:
    """Set up structured JSON logging"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"logger": "%(name)s", "message": %(message)s}'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    log_level = os.environ.get("LOG_LEVEL", "INFO")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    return logger


def log_structured(logger: logging.Logger, level: int, message: str, **kwargs: Any) -> None:
    """
    Log structured message with additional context
    """
    log_data = {"message": message, **kwargs}

    # Convert to JSON string for structured logging
    logger.log(level, json.dumps(log_data, sort_keys=True, default=str))
