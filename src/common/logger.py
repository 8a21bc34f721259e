"""Logging utilities with rich console output.

Library modules log conversion and validation detail through a standard
logger; the CLI front ends use the console helpers for user-facing status.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Parsed CSV header with 12 columns")
    logger.error("Conversion failed", exc_info=True)
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Global console instance for consistent output
console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        tracebacks_show_locals=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(level.upper() if level else env.log_level())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # Propagate so pytest caplog can capture records
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once at a CLI entry point.

    Args:
        level: Default logging level, overridden by LOG_LEVEL
        log_file: Optional file path to also log to a file
    """
    import os

    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler())

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a success message with green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def warning(message: str) -> None:
    """Print a warning message with yellow warning icon."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def error(message: str) -> None:
    """Print an error message with red X icon to stderr."""
    err_console.print(f"[red]✗[/red] {message}")
