"""
Geometry Layer
==============

Bounded Context: Grid layout as pure geometry.

Responsibilities:
- Primitive representation (immutable)
- Ring, axis and label placement
- NO state, NO drawing, NO logging
"""

from winddirections_grid.geometry.shapes import (
    CARDINAL_DIRECTIONS,
    Circle,
    Label,
    Line,
    RenderPlan,
    StrokeStyle,
    SurfaceExtent,
)
from winddirections_grid.geometry.layout import INSET_FACTOR, GridLayout, render

__all__ = [
    "CARDINAL_DIRECTIONS",
    "Circle",
    "Label",
    "Line",
    "RenderPlan",
    "StrokeStyle",
    "SurfaceExtent",
    "INSET_FACTOR",
    "GridLayout",
    "render",
]
