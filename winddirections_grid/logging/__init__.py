"""
Structured Logging for the Wind Directions Grid
===============================================

JSON-structured logs for the host view and the CLI. The layout itself is
pure and never logs.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from winddirections_grid.logging import create_logger, LogEvent
    >>> logger = create_logger("view")
    >>> logger.info(
    ...     event=LogEvent.VIEW_INVALIDATED,
    ...     message="Redraw requested",
    ...     metadata={'reason': 'config'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
