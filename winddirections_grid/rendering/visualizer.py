"""
Grid Visualizer Module
======================

Paints a RenderPlan onto an image.

Design:
- Stateless rendering (no layout decisions)
- Rings and axes through supervision draw utilities
- Labels through cv2.putText (baseline-left origin, same as the plan)

Dependencies:
- supervision (draw utilities, Color, Point)
- opencv (text)
- numpy (arrays)
"""

import math

import cv2
import numpy as np
import supervision as sv

from winddirections_grid.config import GridConfig
from winddirections_grid.geometry.layout import GridLayout
from winddirections_grid.geometry.shapes import Circle, RenderPlan, SurfaceExtent


class GridVisualizer:
    """
    Stateless painter for grid render plans.

    Usage:
        visualizer = GridVisualizer(background_color=sv.Color.from_hex("#f4f4f4"))

        # Paint onto an existing frame
        plan = GridLayout.plan(SurfaceExtent.from_frame(frame), config)
        frame = visualizer.draw_plan(frame, plan)

        # Or allocate a fresh canvas
        image = visualizer.render(320, 320, config)
    """

    def __init__(
        self,
        background_color: sv.Color = sv.Color(r=255, g=255, b=255),
        circle_segments: int = 90,
        font_face: int = cv2.FONT_HERSHEY_SIMPLEX,
    ):
        """
        Initialize visualizer.

        Args:
            background_color: Canvas color used by render()
            circle_segments: Polygon vertices used to approximate a ring
            font_face: OpenCV Hershey font for the labels
        """
        if circle_segments < 3:
            raise ValueError(f"circle_segments must be >= 3, got {circle_segments}")

        self.background_color = background_color
        self.circle_segments = circle_segments
        self.font_face = font_face

    def draw_grid(self, frame: np.ndarray, plan: RenderPlan) -> np.ndarray:
        """
        Draw rings and axis lines with the plan's grid stroke.

        Zero-radius rings paint nothing.

        Returns:
            Frame with grid drawn
        """
        color = plan.grid_style.color
        thickness = _pixel_width(plan.grid_style.width)

        for circle in plan.circles:
            if circle.radius <= 0:
                continue
            frame = sv.draw_polygon(
                scene=frame,
                polygon=self._circle_polygon(circle),
                color=color,
                thickness=thickness,
            )

        for line in plan.lines:
            frame = sv.draw_line(
                scene=frame,
                start=sv.Point(x=line.start[0], y=line.start[1]),
                end=sv.Point(x=line.end[0], y=line.end[1]),
                color=color,
                thickness=thickness,
            )

        return frame

    def draw_labels(self, frame: np.ndarray, plan: RenderPlan) -> np.ndarray:
        """
        Draw the cardinal labels at their text origins.

        Returns:
            Frame with labels drawn
        """
        for label in plan.labels:
            thickness = _pixel_width(label.stroke_width)
            font_scale = cv2.getFontScaleFromHeight(
                self.font_face, max(1, int(round(label.size))), thickness
            )
            origin = (int(round(label.position[0])), int(round(label.position[1])))

            cv2.putText(
                frame,
                label.text,
                origin,
                self.font_face,
                font_scale,
                label.color.as_bgr(),
                thickness,
                cv2.LINE_AA,
            )

        return frame

    def draw_plan(self, frame: np.ndarray, plan: RenderPlan) -> np.ndarray:
        """Draw grid then labels."""
        frame = self.draw_grid(frame, plan)
        return self.draw_labels(frame, plan)

    def render(self, width: int, height: int, config: GridConfig) -> np.ndarray:
        """
        Render the grid onto a new canvas.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            config: Grid style

        Returns:
            BGR image of shape (height, width, 3) in whole pixels; empty
            when either dimension is not a finite positive number
        """
        requested = SurfaceExtent(width=width, height=height)
        canvas = np.full(
            (_pixel_extent(requested.height), _pixel_extent(requested.width), 3),
            self.background_color.as_bgr(),
            dtype=np.uint8,
        )
        # Plan for the allocated pixels so the grid stays centered on the canvas
        plan = GridLayout.plan(SurfaceExtent.from_frame(canvas), config)
        return self.draw_plan(canvas, plan)

    def _circle_polygon(self, circle: Circle) -> np.ndarray:
        """Approximate a ring with a closed polygon (N x 2, int32)."""
        angles = np.linspace(0, 2 * np.pi, self.circle_segments, endpoint=False)
        cx, cy = circle.center
        points = np.stack(
            [cx + circle.radius * np.cos(angles), cy + circle.radius * np.sin(angles)],
            axis=1,
        )
        return np.round(points).astype(np.int32)


def _pixel_extent(size: float) -> int:
    """Canvas dimension in whole pixels, 0 for non-finite or non-positive sizes."""
    if not math.isfinite(size) or size <= 0:
        return 0
    return int(size)


def _pixel_width(width: float) -> int:
    """Stroke width in whole pixels, at least 1."""
    return max(1, int(round(width)))
