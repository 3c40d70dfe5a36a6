import sys
from os import PathLike

from loguru import logger

BASE_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function: <10}</cyan>:<cyan>{line: <3}</cyan> - "
    "<level>{message}</level>"
)


def configure_authex_logging(
    level: str = "INFO",
    sink: str | PathLike[str] | None = None,
    log_format: str | None = None,
    replace_handlers: bool = False,
) -> int:
    """
    Add a loguru handler for authex records.

    Nothing is configured on import; applications that already set up
    loguru keep their handlers and only call this when they want a
    dedicated authex sink.

    Args:
        level (str): Log level ("DEBUG", "INFO", "WARNING", ...).
        sink (str | PathLike | None): Log output destination (file path or None for stdout).
        log_format (str|None): Custom log format.
        replace_handlers (bool): Remove every existing handler first.

    Returns:
        int: Id of the added handler, for ``logger.remove``.
    """
    if replace_handlers:
        logger.remove()

    return logger.add(
        sink or sys.stdout,
        level=level,
        format=log_format or BASE_LOG_FORMAT,
        colorize=True,
        filter="authex",
    )


def enable_authex_logging() -> None:
    logger.enable("authex")


def disable_authex_logging() -> None:
    logger.disable("authex")
