"""Logging setup for slacks.

Diagnostics are emitted through ``logging`` and rendered on stderr by rich, so
they never mix with the message text or prompts written to stdout.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "slacks"

stderr_console = Console(stderr=True)


def setup(debug: bool = False) -> logging.Logger:
    """Attach the stderr handler to the ``slacks`` logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        debug: Emit DEBUG records when True, otherwise only WARNING and above

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=stderr_console,
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
        )
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
