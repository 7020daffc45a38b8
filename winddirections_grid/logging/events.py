"""
Structured Log Event Types
==========================

Typed event names for the grid's structured logs.

Event Naming Convention:
    <area>.<action>

    area: grid, view, config, image, error

Example Log Query (Loki):
    {app="winddirections"} | json | event = "grid.degenerate_surface"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - grid.*: Plan computation and painting
    - view.*: Host view lifecycle (invalidate, resize, config)
    - config.* / image.* / plan.*: Loading and exporting
    - error.*: Error conditions
    """

    # ========== Grid Events ==========
    GRID_RENDERED = "grid.rendered"
    """RenderPlan painted onto a frame."""

    GRID_DEGENERATE_SURFACE = "grid.degenerate_surface"
    """Surface extent is empty, nothing was painted."""

    # ========== View Events ==========
    VIEW_INVALIDATED = "view.invalidated"
    """Redraw requested after a configuration or size change."""

    VIEW_CONFIG_UPDATED = "view.config_updated"
    """Host replaced the grid configuration."""

    VIEW_RESIZED = "view.resized"
    """Host surface extent changed."""

    # ========== IO Events ==========
    CONFIG_LOADED = "config.loaded"
    """Grid configuration loaded from YAML."""

    IMAGE_WRITTEN = "image.written"
    """Rendered grid written to disk."""

    PLAN_EXPORTED = "plan.exported"
    """RenderPlan serialized to JSON."""

    # ========== Error Events ==========
    CONFIG_INVALID = "error.config_invalid"
    """Configuration rejected during validation."""

    IMAGE_WRITE_ERROR = "error.image_write"
    """Rendered grid could not be written."""


# Event categories for filtering
GRID_EVENTS = {
    LogEvent.GRID_RENDERED,
    LogEvent.GRID_DEGENERATE_SURFACE,
}

VIEW_EVENTS = {
    LogEvent.VIEW_INVALIDATED,
    LogEvent.VIEW_CONFIG_UPDATED,
    LogEvent.VIEW_RESIZED,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_INVALID,
    LogEvent.IMAGE_WRITE_ERROR,
}
