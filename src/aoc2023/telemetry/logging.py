"""Root logger configuration backed by rich."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

_HANDLER_NAME = "aoc2023-rich"


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a single rich handler on the root logger at ``level``."""
    root = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)

    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s %(message)s"))
    root.addHandler(handler)
