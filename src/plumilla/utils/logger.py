"""Namespaced loggers for plumilla.

Every module logs under the ``plumilla`` hierarchy, at DEBUG level only:

- ``plumilla``: characters scanned and tokens produced per scan() call
- ``plumilla.parser``: blocks built from the token list
- ``plumilla.renderers.html``: blocks rendered and output size
- ``plumilla.lexer.classifiers.fence``: unterminated fences scanned as text

Errors are raised, never logged. No handlers are installed; enable output
in the host application, e.g.
``logging.getLogger("plumilla").setLevel(logging.DEBUG)``.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "plumilla"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the plumilla hierarchy.

    Names already under ``plumilla`` are used as is; anything else is
    nested below it.

    Example:
        >>> get_logger("mymodule").name
        'plumilla.mymodule'
        >>> get_logger("plumilla.parser").name
        'plumilla.parser'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
