"""
Wind Directions Grid v1.0
=========================

Bounded Context: Static compass backdrop for a wind-directions display.

Concentric rings, a horizontal and a vertical axis line and the four
cardinal labels, laid out from the surface extent and a style config.

Architecture:

    winddirections_grid/
    ├── config.py          # GridConfig, defaults, YAML/attribute loading
    ├── geometry/          # Pure layout (immutable, stateless)
    │   ├── shapes.py      # SurfaceExtent, Circle, Line, Label, RenderPlan
    │   └── layout.py      # GridLayout / render()
    │
    ├── rendering/         # Painting (stateless drawing)
    │   └── visualizer.py  # GridVisualizer
    │
    ├── view.py            # WindDirectionGrid (host: invalidate / redraw)
    └── logging/           # Structured JSON logs

Usage:

    # 1. Compute the plan (pure)
    from winddirections_grid import GridConfig, SurfaceExtent, render

    plan = render(SurfaceExtent(width=200, height=200), GridConfig(circle_count=2))
    [c.radius for c in plan.circles]    # [90.0, 45.0, 0.0]

    # 2. Paint it
    from winddirections_grid import GridVisualizer

    image = GridVisualizer().render(200, 200, GridConfig(circle_count=2))

    # 3. Or host it
    from winddirections_grid import WindDirectionGrid

    grid = WindDirectionGrid(on_redraw_requested=schedule_paint)
    grid.update_config(grid_color="#888888")
    frame = grid.draw(frame)
"""

# Configuration
from winddirections_grid.config import (
    DEFAULT_CIRCLE_COUNT,
    DEFAULT_GRID_LINE_WIDTH,
    DEFAULT_LABEL_TEXT_SIZE,
    GridConfig,
    InvalidConfigurationError,
    default_config,
    parse_color,
)

# Geometry Layer (immutable, stateless)
from winddirections_grid.geometry.shapes import (
    Circle,
    Label,
    Line,
    RenderPlan,
    StrokeStyle,
    SurfaceExtent,
)
from winddirections_grid.geometry.layout import INSET_FACTOR, GridLayout, render

# Rendering Layer (stateless)
from winddirections_grid.rendering.visualizer import GridVisualizer

# Host view
from winddirections_grid.view import WindDirectionGrid

__all__ = [
    # Configuration
    "DEFAULT_CIRCLE_COUNT",
    "DEFAULT_GRID_LINE_WIDTH",
    "DEFAULT_LABEL_TEXT_SIZE",
    "GridConfig",
    "InvalidConfigurationError",
    "default_config",
    "parse_color",
    # Geometry
    "Circle",
    "Label",
    "Line",
    "RenderPlan",
    "StrokeStyle",
    "SurfaceExtent",
    "INSET_FACTOR",
    "GridLayout",
    "render",
    # Rendering
    "GridVisualizer",
    # View
    "WindDirectionGrid",
]

__version__ = "1.0.0"
