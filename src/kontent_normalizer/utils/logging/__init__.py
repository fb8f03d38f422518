# ABOUTME: Logging configuration and structured logger helpers
# ABOUTME: Provides dual-mode loguru sinks and structlog context binding

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .utils import LogContext, get_logger, with_item_context, with_operation_context, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Utilities
    "LogContext",
    "get_logger",
    "with_item_context",
    "with_operation_context",
    "with_pipeline_context",
]
