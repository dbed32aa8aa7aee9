"""Logging configuration."""

import logging
from typing import Optional

ROOT_LOGGER = "kubectl_bad"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    root = logging.getLogger(ROOT_LOGGER)

    # Only configure if no handlers exist
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    return logging.getLogger(name or ROOT_LOGGER)


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between DEBUG and WARNING."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.WARNING)
