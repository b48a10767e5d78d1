"""
Common utilities shared across brewup modules.
"""

from __future__ import annotations

from typing import Sequence

from .logging_config import get_logger


def vlog(msg: str, verbose: bool = False) -> None:
    """
    Emit a verbose trace message.

    Args:
        msg: Message to log
        verbose: Whether verbose mode is enabled
    """
    if verbose:
        get_logger().debug(msg)


def format_command(command: Sequence[str]) -> str:
    """Render a command tuple the way it would be typed in a shell."""
    return " ".join(command)
