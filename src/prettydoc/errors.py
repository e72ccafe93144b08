"""Exception classes for prettydoc.

Every error is raised eagerly while a document or configuration is being
built. Rendering a well-formed tree with a valid config cannot fail.
"""

from __future__ import annotations


class PrettyDocError(Exception):
    """Base exception for all prettydoc errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(PrettyDocError, ValueError):
    """A document node or config was built with an invalid parameter.

    Examples: a negative indent amount, a ``Text`` payload containing a raw
    line break, or a child that is not a document node.
    """

    def __init__(self, argument: str, message: str) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending parameter (e.g., "amount")
            message: Description of the violated constraint
        """
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")
