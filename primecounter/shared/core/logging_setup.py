"""Root logger configuration."""

from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler

from .configuration import LoggingConfig

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config: Optional[LoggingConfig] = None) -> logging.Handler:
    """Install a single console handler on the root logger.

    Calling it again replaces the handler installed by the previous call, so
    the level can be changed after the configuration is reloaded.

    Args:
        config: Logging settings; defaults are used when omitted

    Returns:
        The installed handler
    """
    config = config or LoggingConfig()
    root = logging.getLogger()

    for handler in list(root.handlers):
        if getattr(handler, "_primecounter", False):
            root.removeHandler(handler)

    if config.rich_console:
        handler: logging.Handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    handler._primecounter = True  # type: ignore[attr-defined]

    root.addHandler(handler)
    root.setLevel(config.level.upper())
    return handler
