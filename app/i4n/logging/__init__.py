"""Structured logging for i4n.

Public API:
    - configure_logging(): Opt-in structlog setup for applications
    - get_module_logger(): Get a logger for the calling module

Example:
    from i4n.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from i4n.logging.setup import configure_logging, get_module_logger

__all__ = ["configure_logging", "get_module_logger"]
