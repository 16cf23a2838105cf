"""Structlog loggers for the i4n package.

Importing i4n never configures structlog or the standard library logging:
module loggers are lazy proxies that pick up whatever configuration the host
application installs. Applications without their own setup call
``configure_logging()`` once at startup.
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from i4n.configuration import settings


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def build_processors(json_output: bool) -> List[Processor]:
    """Processor chain ending with a JSON or console renderer."""
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library logging.

    Args:
        log_level: Level name, defaults to settings.LOG_LEVEL. Ignored under
            pytest, where output is suppressed.
        is_production: JSON output when True, console output otherwise.
            Defaults to settings.is_production.

    Returns:
        Logger of the i4n package.
    """
    json_output = settings.is_production if is_production is None else is_production
    level = getattr(logging, (log_level or settings.LOG_LEVEL).upper(), logging.INFO)
    if _is_test_environment():
        level = logging.CRITICAL + 1

    structlog.configure(
        processors=build_processors(json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)
    return structlog.stdlib.get_logger("i4n")


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last part of the module name) and ``module_path``.
    The logger is resolved against the structlog configuration on first use,
    not when this is called.

    Example:
        # In i4n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "i4n.translator"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.stdlib.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.stdlib.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
