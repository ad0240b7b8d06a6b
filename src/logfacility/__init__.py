"""
logfacility — process-wide leveled logging to stdout.

A small logging facade providing:
- A single process-wide verbosity threshold (SILENT < NORMAL < WARNING < DEBUG)
- Named, immutable loggers with optional caller-location annotation
- ANSI-colored severity tags and timestamped message blocks
- Atomic single-write output, safe across threads

Public API:
    set_verbosity    — set the process-wide threshold
    new_logger       — create a logger from a flexible argument list
    new_logger_with_custom_boundary — logger that reports a wrapper's caller
    format_message   — printf-style formatting with value padding
    caller_location  — first stack frame outside a boundary path
    info/warn/error  — log through the default logger
"""

from ._version import __version__, __app_name__
from .levels import (
    VerbosityLevel, Severity, Color, SeverityStyle, SEVERITY_STYLES,
    set_severity_tag,
)
from .settings import (
    VerbositySetting, set_verbosity, get_verbosity, parse_verbosity,
)
from .formatting import format_message
from .caller import caller_location
from .logger import (
    Logger, LogFacilityError, EmptyBoundaryPathError,
    new_logger, new_logger_unnamed, new_logger_named, new_logger_named_format,
    new_logger_with_custom_boundary,
)

default_logger = new_logger()


def info(template, *values):
    """Log at info severity through the default logger."""
    default_logger.info(template, *values)


def warn(template, *values):
    """Log at warning severity through the default logger."""
    default_logger.warn(template, *values)


def error(template, *values):
    """Log at error severity through the default logger."""
    default_logger.error(template, *values)


__all__ = [
    '__version__', '__app_name__',
    'VerbosityLevel', 'Severity', 'Color', 'SeverityStyle', 'SEVERITY_STYLES',
    'set_severity_tag',
    'VerbositySetting', 'set_verbosity', 'get_verbosity', 'parse_verbosity',
    'format_message', 'caller_location',
    'Logger', 'LogFacilityError', 'EmptyBoundaryPathError',
    'new_logger', 'new_logger_unnamed', 'new_logger_named',
    'new_logger_named_format', 'new_logger_with_custom_boundary',
    'default_logger', 'info', 'warn', 'error',
]
