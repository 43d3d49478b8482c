import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler
from scim_v2.config import settings


console = Console(stderr=True)


def setup_logging(
    level: Optional[str] = None,
    format: str = "%(message)s",
    datefmt: str = "[%X]",
) -> None:
    """Attach a rich handler to the ``scim_v2`` logger.

    The library never calls this itself; applications that want readable codec
    traces call it once at startup.
    """
    log_level = level or settings.log_level

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.debug,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    handler.setFormatter(logging.Formatter(fmt=format, datefmt=datefmt))

    root = logging.getLogger("scim_v2")
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# Export a default logger
logger = get_logger("scim_v2")
logger.addHandler(logging.NullHandler())
