"""
Structured JSON Logger
======================

JSON logs for the grid renderer, its host view and the CLI.

Design:
- One JSON object per line on stderr
- Wraps Python's logging module (handlers, levels, propagation)
- Typed events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="view")
    >>> logger.info(
    ...     event=LogEvent.VIEW_RESIZED,
    ...     message="Surface resized",
    ...     metadata={'width': 320, 'height': 240}
    ... )

Output:
    {
        "timestamp": "2026-10-18T09:12:01.532210+00:00",
        "level": "INFO",
        "component": "view",
        "event": "view.resized",
        "message": "Surface resized",
        "metadata": {"width": 320, "height": 240}
    }
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "view", "cli")
        logger: Underlying Python logger instance
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "view")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: winddirections_grid.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"winddirections_grid.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(getattr(logging, level), json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
        """
        self._log('INFO', event, message, metadata)

    def warning(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log WARNING level message.

        Example:
            >>> logger.warning(
            ...     event=LogEvent.GRID_DEGENERATE_SURFACE,
            ...     message="Nothing to draw",
            ...     metadata={'width': 0, 'height': 0}
            ... )
        """
        self._log('WARNING', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception that caused the error
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """
    Pass-through formatter: StructuredLogger already emits JSON.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("cli", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
