"""
Logging setup - rich console output plus an optional log file.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger once for the application.

    Args:
        config: Level name and optional log file path
    """
    level = getattr(logging, str(config.level).upper(), logging.INFO)

    handlers: list = [
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
    ]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
