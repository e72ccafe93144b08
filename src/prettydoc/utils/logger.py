"""Logger lookup for prettydoc modules.

Every module logs through ``get_logger(__name__)`` so all records live under
the ``prettydoc`` logger tree. Applications enable layout tracing with:

    >>> import logging
    >>> logging.getLogger("prettydoc.renderers").setLevel(logging.DEBUG)

prettydoc itself never attaches handlers.
"""

from __future__ import annotations

import logging

_ROOT = "prettydoc"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for ``name`` inside the prettydoc tree.

    Names already under ``prettydoc`` are used as given; anything else is
    nested below it, so ``get_logger("mymodule").name`` is
    ``"prettydoc.mymodule"``.
    """
    if name.partition(".")[0] != _ROOT:
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
