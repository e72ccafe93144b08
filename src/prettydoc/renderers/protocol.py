"""DocRenderer protocol: stable interface for document renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this protocol.
The built-in ``LayoutRenderer`` is the reference implementation.

Example:
    from prettydoc.renderers.protocol import DocRenderer

    def format_module(renderer: DocRenderer, doc: Doc) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from prettydoc.nodes import Doc


class DocRenderer(Protocol):
    """Protocol for document renderers.

    Implementations must accept a document tree and return a rendered string.
    The built-in ``LayoutRenderer`` conforms to this protocol.

    """

    def render(self, doc: Doc) -> str:
        """Render a document tree to a string.

        Args:
            doc: The document to lay out.

        Returns:
            Rendered string output.

        """
        ...
