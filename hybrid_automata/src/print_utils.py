"""
Utilities for verbosity-controlled printing.
"""

from .config import config


def vprint(message: str, level: str = "normal") -> None:
    """
    Verbosity-controlled print function.

    Args:
        message: Message to print
        level: Print level ('normal', 'always')
    """
    if level == "always" or level == "normal" and config.logging.verbose:
        print(message)
