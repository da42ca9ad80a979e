"""Error handlers and diagnostic log sinks."""

from .error_handler import LOG_NOTICE, ErrorHandler, ResolvedOutcome
from .log_sink import LoggerSink, LogSink

__all__ = ["ErrorHandler", "LOG_NOTICE", "LogSink", "LoggerSink", "ResolvedOutcome"]
