"""prettydoc renderers.

Renderers turn document trees into text.

Available Renderers:
- LayoutRenderer: Wadler-style width-aware layout with an explicit work stack

Thread Safety:
All per-render state is created inside each render() call.
Safe for concurrent use from multiple threads.

"""

from prettydoc.renderers.layout import LayoutRenderer
from prettydoc.renderers.protocol import DocRenderer

__all__ = ["DocRenderer", "LayoutRenderer"]
