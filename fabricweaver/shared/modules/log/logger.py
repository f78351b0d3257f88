"""
Shared logging utilities for builders, the process runner and the CLI.
"""
import logging
from typing import Optional, Union

ROOT_LOGGER_NAME = "fabricweaver"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the package root logger (once) and set its level.

    Args:
        level: Logging level name or number

    Returns:
        logging.Logger: The package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return root


def get_logger(service_name: str, context: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the package hierarchy.

    Args:
        service_name: Component name used as the log prefix
        context: Optional sub-scope, e.g. the binary being run

    Returns:
        logging.Logger: Logger named fabricweaver.<service_name>[.<context>]
    """
    name = f"{ROOT_LOGGER_NAME}.{service_name}"
    if context:
        name = f"{name}.{context}"
    return logging.getLogger(name)
