from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Send ``fuzzy_align`` logs to stderr through a single rich handler."""
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger("fuzzy_align")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
