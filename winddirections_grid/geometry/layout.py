"""
Grid Layout Module
==================

Stateless layout - turns a surface extent and a GridConfig into a
RenderPlan.

Design:
- Pure functions (no state, no logging, no drawing)
- Full recompute on every call
- Degenerate surfaces yield an empty plan instead of raising
"""

from typing import Dict, Tuple

from winddirections_grid.config import GridConfig, InvalidConfigurationError
from winddirections_grid.geometry.shapes import (
    Circle,
    Label,
    Line,
    RenderPlan,
    StrokeStyle,
    SurfaceExtent,
)


# Outer ring and axis half-length as a fraction of the surface radius.
INSET_FACTOR = 0.9


class GridLayout:
    """
    Stateless layout calculator for the compass grid.

    All methods are static. ``plan`` is the entry point; the remaining
    methods expose each layout step for hosts that draw piecemeal.

    Usage:
        plan = GridLayout.plan(SurfaceExtent(200, 200), GridConfig(circle_count=2))
        [c.radius for c in plan.circles]  # [90.0, 45.0, 0.0]
    """

    @staticmethod
    def radius(extent: SurfaceExtent) -> float:
        """Half of the smaller surface dimension."""
        return min(extent.width, extent.height) / 2

    @staticmethod
    def line_size(radius: float) -> float:
        """Outer ring radius and axis half-length."""
        return radius * INSET_FACTOR

    @staticmethod
    def circles(
        center: Tuple[float, float],
        line_size: float,
        circle_count: int,
    ) -> Tuple[Circle, ...]:
        """
        Concentric rings from outermost to the zero-radius center point.

        Returns ``circle_count + 1`` circles with radii
        ``line_size * i / circle_count`` for ``i = circle_count .. 0``.

        Raises:
            InvalidConfigurationError: If circle_count < 1
        """
        if circle_count < 1:
            raise InvalidConfigurationError(
                f"circle_count must be >= 1, got {circle_count}"
            )

        return tuple(
            Circle(center=center, radius=line_size * i / circle_count)
            for i in range(circle_count, -1, -1)
        )

    @staticmethod
    def axes(center: Tuple[float, float], line_size: float) -> Tuple[Line, Line]:
        """Horizontal then vertical axis line through the center."""
        cx, cy = center
        horizontal = Line(start=(cx - line_size, cy), end=(cx + line_size, cy))
        vertical = Line(start=(cx, cy - line_size), end=(cx, cy + line_size))
        return horizontal, vertical

    @staticmethod
    def label_positions(
        center: Tuple[float, float],
        radius: float,
        text_size: float,
    ) -> Dict[str, Tuple[float, float]]:
        """
        Baseline-left text origins for N, E, S and W.

        Offsets differ per letter so each glyph sits visually centered on
        its compass point just inside the surface radius.
        """
        cx, cy = center
        return {
            "N": (cx - text_size / 3, cy - radius + text_size),
            "E": (cx + radius - text_size, cy + text_size / 3),
            "S": (cx - text_size / 4, cy + radius - text_size / 5),
            "W": (cx - radius + text_size / 5, cy + text_size / 3),
        }

    @staticmethod
    def plan(extent: SurfaceExtent, config: GridConfig) -> RenderPlan:
        """
        Compute the full RenderPlan.

        Args:
            extent: Surface to draw into
            config: Grid style

        Returns:
            Plan with circles, axis lines and labels, or an empty plan
            when the extent is degenerate

        Raises:
            InvalidConfigurationError: If config.circle_count < 1
        """
        grid_style = StrokeStyle(color=config.grid_color, width=config.grid_line_width)

        if config.circle_count < 1:
            raise InvalidConfigurationError(
                f"circle_count must be >= 1, got {config.circle_count}"
            )

        if extent.is_degenerate:
            return RenderPlan(extent=extent, grid_style=grid_style)

        radius = GridLayout.radius(extent)
        line_size = GridLayout.line_size(radius)
        center = extent.center

        labels = tuple(
            Label(
                text=text,
                position=position,
                size=config.label_text_size,
                color=config.label_color,
                stroke_width=config.label_stroke_width,
            )
            for text, position in GridLayout.label_positions(
                center, radius, config.label_text_size
            ).items()
        )

        return RenderPlan(
            extent=extent,
            grid_style=grid_style,
            circles=GridLayout.circles(center, line_size, config.circle_count),
            lines=GridLayout.axes(center, line_size),
            labels=labels,
        )


def render(extent: SurfaceExtent, config: GridConfig) -> RenderPlan:
    """Compute the RenderPlan for one grid render (see GridLayout.plan)."""
    return GridLayout.plan(extent, config)
