"""
Geometric Primitives Module
===========================

Pure value objects describing one grid render - NO drawing, NO state.

Design:
- Immutable primitives (frozen dataclass pattern)
- Coordinates in drawing units, origin top-left, y pointing down
- to_dict() for JSON export
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import supervision as sv


CARDINAL_DIRECTIONS = ("N", "E", "S", "W")


@dataclass(frozen=True)
class SurfaceExtent:
    """
    Drawing area supplied by the host.

    Zero, negative or non-finite dimensions are allowed and describe a
    degenerate surface that nothing can be drawn into.

    Attributes:
        width: Surface width
        height: Surface height
    """

    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        """True when the surface has no drawable area."""
        return not (
            math.isfinite(self.width)
            and math.isfinite(self.height)
            and self.width > 0
            and self.height > 0
        )

    @property
    def center(self) -> Tuple[float, float]:
        """Surface midpoint (x, y)."""
        return self.width / 2, self.height / 2

    @classmethod
    def from_frame(cls, frame) -> "SurfaceExtent":
        """Extent of an H x W (x C) image array."""
        height, width = frame.shape[:2]
        return cls(width=width, height=height)


@dataclass(frozen=True)
class Circle:
    """
    Ring of the grid.

    Attributes:
        center: (x, y) ring center
        radius: Ring radius (0 for the center point)
    """

    center: Tuple[float, float]
    radius: float

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "circle", "center": list(self.center), "radius": self.radius}


@dataclass(frozen=True)
class Line:
    """
    Axis line segment.

    Attributes:
        start: (x, y) segment start
        end: (x, y) segment end
    """

    start: Tuple[float, float]
    end: Tuple[float, float]

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def midpoint(self) -> Tuple[float, float]:
        return (self.start[0] + self.end[0]) / 2, (self.start[1] + self.end[1]) / 2

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "line", "start": list(self.start), "end": list(self.end)}


@dataclass(frozen=True)
class Label:
    """
    Cardinal direction label.

    ``position`` is the baseline-left origin of the text.

    Attributes:
        text: One of "N", "E", "S", "W"
        position: (x, y) text origin
        size: Font size
        color: Fill and stroke color
        stroke_width: Glyph outline width
    """

    text: str
    position: Tuple[float, float]
    size: float
    color: sv.Color
    stroke_width: float

    def __post_init__(self):
        """Validate label text."""
        if self.text not in CARDINAL_DIRECTIONS:
            raise ValueError(
                f"Label text must be one of {CARDINAL_DIRECTIONS}, got {self.text!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "label",
            "text": self.text,
            "position": list(self.position),
            "size": self.size,
            "color": self.color.as_hex(),
            "stroke_width": self.stroke_width,
        }


@dataclass(frozen=True)
class StrokeStyle:
    """Stroke shared by every ring and axis line."""

    color: sv.Color
    width: float

    def to_dict(self) -> Dict[str, Any]:
        return {"color": self.color.as_hex(), "width": self.width}


@dataclass(frozen=True)
class RenderPlan:
    """
    Ordered drawing primitives for one render pass.

    Draw order: circles (outer to inner), axis lines (horizontal then
    vertical), labels (N, E, S, W). An empty plan describes a degenerate
    surface.

    Attributes:
        extent: Surface the plan was computed for
        grid_style: Stroke for circles and lines
        circles: Concentric rings
        lines: Axis lines
        labels: Cardinal labels
    """

    extent: SurfaceExtent
    grid_style: StrokeStyle
    circles: Tuple[Circle, ...] = ()
    lines: Tuple[Line, ...] = ()
    labels: Tuple[Label, ...] = ()

    @property
    def primitives(self) -> Tuple[Circle | Line | Label, ...]:
        """All primitives in draw order."""
        return self.circles + self.lines + self.labels

    @property
    def is_empty(self) -> bool:
        return not self.primitives

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "extent": {"width": self.extent.width, "height": self.extent.height},
            "grid_style": self.grid_style.to_dict(),
            "primitives": [p.to_dict() for p in self.primitives],
        }
