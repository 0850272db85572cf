from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from dependency_injector.resources import Resource

from .filters import SecretRedactionFilter
from .handlers import build_json_file_handler, build_human_console_handler


class StepLogger(Resource):
    """Structured logger for the step run.

    Console output is human-readable; an optional JSONL file keeps the
    structured extras. Secret values are redacted before any handler sees
    a record.
    """

    def init(
        self,
        *,
        logger_name: str = "danger_step",
        level: str = "INFO",
        console_output: bool = True,
        log_file: Optional[Path] = None,
        secrets: Iterable[str] = (),
    ) -> "StepLogger":
        """Initialize the logger.

        Args:
            logger_name: Logger name; module loggers below it share the handlers
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            console_output: Whether to log to stdout
            log_file: Optional JSON-lines log file
            secrets: Values to mask in every record

        Returns:
            Self for dependency_injector Resource pattern
        """
        numeric_level = getattr(logging, level.upper(), logging.INFO)

        self._logger = logging.getLogger(logger_name)
        self._logger.setLevel(numeric_level)
        self._logger.propagate = False

        self._logger.handlers.clear()
        self._handlers = []

        redaction = SecretRedactionFilter(secrets)

        if log_file:
            file_handler = build_json_file_handler(Path(log_file), level=numeric_level)
            self._handlers.append(file_handler)

        if console_output:
            self._handlers.append(build_human_console_handler(level=numeric_level))

        for handler in self._handlers:
            handler.addFilter(redaction)
            self._logger.addHandler(handler)

        return self

    def shutdown(self, resource: "StepLogger") -> None:
        """Flush and close all handlers."""
        for handler in self._handlers:
            handler.flush()
            handler.close()

        self._logger.handlers.clear()

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with optional extra fields."""
        if kwargs:
            self._logger.debug(message, extra=kwargs)
        else:
            self._logger.debug(message)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with optional extra fields."""
        if kwargs:
            self._logger.info(message, extra=kwargs)
        else:
            self._logger.info(message)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with optional extra fields."""
        if kwargs:
            self._logger.warning(message, extra=kwargs)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        """Log error message with optional extra fields and exception info."""
        if kwargs:
            self._logger.error(message, extra=kwargs, exc_info=exc_info)
        else:
            self._logger.error(message, exc_info=exc_info)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception with traceback and optional extra fields."""
        if kwargs:
            self._logger.exception(message, extra=kwargs)
        else:
            self._logger.exception(message)
