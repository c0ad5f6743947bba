"""Puszta renderers.

Renderers are the text measurement/drawing collaborators the layout
engine hands positioned segments to.

Available Renderers:
- DisplayList: In-memory renderer with table-driven font metrics that
  records draw calls as DrawCommand objects

"""

from puszta.renderers.display_list import DisplayList, DrawCommand, FontMetrics
from puszta.renderers.protocol import TextRenderer

__all__ = ["DisplayList", "DrawCommand", "FontMetrics", "TextRenderer"]
