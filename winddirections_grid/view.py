"""
Wind Direction Grid View
========================

Host-side holder for the grid: owns the current configuration and surface
extent and tells the host when a repaint is needed.

Design:
- Configuration changes are explicit calls, each followed by invalidate()
- invalidate() notifies the host through an optional callback
- No cached plan: every plan()/draw() recomputes from scratch
"""

from typing import Any, Callable, Optional

import numpy as np

from winddirections_grid.config import GridConfig, default_config
from winddirections_grid.geometry.layout import GridLayout
from winddirections_grid.geometry.shapes import RenderPlan, SurfaceExtent
from winddirections_grid.logging import LogEvent, StructuredLogger, create_logger
from winddirections_grid.rendering.visualizer import GridVisualizer


class WindDirectionGrid:
    """
    Compass backdrop grid bound to a host surface.

    Usage:
        grid = WindDirectionGrid(width=320, height=320, on_redraw_requested=schedule_paint)

        grid.update_config(circle_count=5, grid_color="#2a6f97")  # -> schedule_paint()
        grid.resize(480, 320)                                     # -> schedule_paint()

        frame = grid.draw(frame)  # paints and clears needs_redraw
    """

    def __init__(
        self,
        config: Optional[GridConfig] = None,
        width: float = 0,
        height: float = 0,
        logger: Optional[StructuredLogger] = None,
        on_redraw_requested: Optional[Callable[[], None]] = None,
    ):
        """
        Args:
            config: Initial style (default: widget defaults)
            width: Initial surface width
            height: Initial surface height
            logger: Structured logger (default: "view" component logger)
            on_redraw_requested: Called every time the grid is invalidated
        """
        self._config = config if config is not None else default_config()
        self._extent = SurfaceExtent(width=width, height=height)
        self._logger = logger or create_logger("view")
        self._on_redraw_requested = on_redraw_requested
        self.needs_redraw = True

    @property
    def config(self) -> GridConfig:
        return self._config

    @property
    def extent(self) -> SurfaceExtent:
        return self._extent

    def set_config(self, config: GridConfig) -> None:
        """Replace the whole configuration and request a redraw."""
        if not isinstance(config, GridConfig):
            raise TypeError(f"config must be GridConfig, got {type(config)}")

        self._config = config
        self._logger.debug(
            event=LogEvent.VIEW_CONFIG_UPDATED,
            message="Grid configuration replaced",
            metadata=config.to_dict(),
        )
        self.invalidate(reason="config")

    def update_config(self, **changes: Any) -> GridConfig:
        """
        Replace some configuration fields and request a redraw.

        Raises:
            InvalidConfigurationError: If a change is rejected; the current
                configuration is kept
        """
        self.set_config(self._config.with_changes(**changes))
        return self._config

    def resize(self, width: float, height: float) -> None:
        """Adopt a new surface extent; invalidates only on change."""
        extent = SurfaceExtent(width=width, height=height)
        if extent == self._extent:
            return

        self._extent = extent
        self._logger.debug(
            event=LogEvent.VIEW_RESIZED,
            message="Grid surface resized",
            metadata={'width': width, 'height': height},
        )
        self.invalidate(reason="resize")

    def invalidate(self, reason: str = "explicit") -> None:
        """Mark the grid dirty and notify the host."""
        self.needs_redraw = True
        self._logger.debug(
            event=LogEvent.VIEW_INVALIDATED,
            message="Grid redraw requested",
            metadata={'reason': reason},
        )
        if self._on_redraw_requested is not None:
            self._on_redraw_requested()

    def plan(self) -> RenderPlan:
        """Fresh RenderPlan for the current configuration and extent."""
        return GridLayout.plan(self._extent, self._config)

    def draw(
        self,
        frame: np.ndarray,
        visualizer: Optional[GridVisualizer] = None,
    ) -> np.ndarray:
        """
        Paint the grid onto a frame.

        The frame size becomes the surface extent.

        Returns:
            Frame with the grid drawn
        """
        extent = SurfaceExtent.from_frame(frame)
        if extent != self._extent:
            self._extent = extent

        plan = self.plan()
        if plan.is_empty:
            self._logger.warning(
                event=LogEvent.GRID_DEGENERATE_SURFACE,
                message="Grid surface is empty, nothing drawn",
                metadata={'width': extent.width, 'height': extent.height},
            )
        else:
            frame = (visualizer or GridVisualizer()).draw_plan(frame, plan)
            self._logger.debug(
                event=LogEvent.GRID_RENDERED,
                message="Grid painted",
                metadata={
                    'width': extent.width,
                    'height': extent.height,
                    'circles': len(plan.circles),
                },
            )

        self.needs_redraw = False
        return frame
