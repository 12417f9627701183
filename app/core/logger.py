"""
Structured logging for the Inventory Rules Service.

Provides a single logger instance with:
- JSON or coloured console output
- Correlation IDs taken from the current request context
- Business event records (used for customer notifications)
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from app.core.config import config
from app.core.context import get_correlation_id


class StructuredLogger:
    """
    Logger with structured entries and correlation ID support
    """

    def __init__(self, name: str = None):
        self.service_name = name or config.service_name
        self.environment = config.environment
        self.level = getattr(logging, config.log_level.upper(), logging.INFO)
        self._logger = logging.getLogger(self.service_name)
        self._setup_logging()

    def _setup_logging(self):
        """Configure Python logging with handlers"""
        self._logger.handlers.clear()
        self._logger.setLevel(self.level)
        self._logger.propagate = False

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(self.level)
            if config.log_format == "json":
                console_handler.setFormatter(JSONFormatter(self.service_name))
            else:
                console_handler.setFormatter(ConsoleFormatter())
            self._logger.addHandler(console_handler)

        if config.log_to_file:
            log_dir = os.path.dirname(config.log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(config.log_file_path)
            file_handler.setLevel(self.level)
            # Files are always JSON
            file_handler.setFormatter(JSONFormatter(self.service_name))
            self._logger.addHandler(file_handler)

    def _build_log_entry(
        self,
        level: str,
        message: str,
        correlation_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        """Build structured log entry"""
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.upper(),
            "service": self.service_name,
            "environment": self.environment,
            "message": message,
            "correlationId": correlation_id or get_correlation_id(),
        }

        if metadata:
            entry["metadata"] = metadata

        entry.update(kwargs)
        return entry

    def _log(
        self,
        level: str,
        message: str,
        correlation_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        entry = self._build_log_entry(level, message, correlation_id, metadata, **kwargs)
        # 'message' is reserved on LogRecord
        extra = {"structured": {k: v for k, v in entry.items() if k != "message"}}
        self._logger.log(getattr(logging, level.upper()), message, extra=extra)

    def debug(self, message: str, correlation_id: Optional[str] = None,
              metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Debug level logging"""
        self._log("DEBUG", message, correlation_id, metadata, **kwargs)

    def info(self, message: str, correlation_id: Optional[str] = None,
             metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Info level logging"""
        self._log("INFO", message, correlation_id, metadata, **kwargs)

    def warning(self, message: str, correlation_id: Optional[str] = None,
                metadata: Optional[Dict[str, Any]] = None, **kwargs):
        """Warning level logging"""
        self._log("WARNING", message, correlation_id, metadata, **kwargs)

    def error(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Error level logging"""
        metadata = dict(metadata or {})
        if error:
            if isinstance(error, Exception):
                metadata["error"] = {"type": type(error).__name__, "message": str(error)}
            else:
                metadata["error"] = {"message": str(error)}
        self._log("ERROR", message, correlation_id, metadata, **kwargs)

    def business_event(
        self,
        event_type: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[Union[str, int]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Log a business event such as a customer notification"""
        self._log(
            "INFO",
            f"Business event: {event_type}",
            metadata=metadata,
            eventType=event_type,
            entity={"type": entity_type, "id": entity_id},
        )


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record):
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, "structured", {}))
        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        line = f"{color}[{timestamp}] {record.levelname}{reset} - {record.getMessage()}"

        structured = getattr(record, "structured", {})
        if structured.get("metadata"):
            line += f" {json.dumps(structured['metadata'], default=str)}"
        return line


logger = StructuredLogger()
