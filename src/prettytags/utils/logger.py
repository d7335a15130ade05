"""Logging for prettytags.

All loggers live under the ``prettytags`` namespace and the library never
installs handlers. Rule registration, rejected rule conflicts, rule resets,
formatter swaps and finalize are logged at DEBUG; finalizing a document
with unclosed tags is logged as a WARNING.

Example:
    >>> import logging
    >>> logging.basicConfig()
    >>> logging.getLogger("prettytags").setLevel(logging.DEBUG)
    >>> fmtr = AutoIndent()
    >>> fmtr.register(["body"], FmtRule.INDENT_ALWAYS)
    DEBUG:prettytags.formatters.auto_indent:Registered ['body'] for INDENT_ALWAYS
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get the prettytags logger for a module.

    Names outside the package (e.g. from a custom formatter living in user
    code) are moved under ``prettytags.`` so one level setting on the
    ``prettytags`` logger controls them all.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("prettytags.writer").name
        'prettytags.writer'
        >>> get_logger("my_formatters").name
        'prettytags.my_formatters'
    """
    if not (name == "prettytags" or name.startswith("prettytags.")):
        name = f"prettytags.{name}"
    return logging.getLogger(name)
