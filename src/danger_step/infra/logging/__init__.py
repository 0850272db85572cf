from __future__ import annotations

from .logger import StepLogger
from .handlers import build_json_file_handler, build_human_console_handler
from .formatters import JSONFormatter
from .filters import SecretRedactionFilter

__all__ = [
    "StepLogger",
    "build_json_file_handler",
    "build_human_console_handler",
    "JSONFormatter",
    "SecretRedactionFilter",
]
