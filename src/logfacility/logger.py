"""
Logger — immutable named loggers and the emit path.

Each call is gated by the verbosity cell the logger refers to, then
rendered into one block and written to stdout in a single call:

    <location>                       (when the level asks for it)
    Logger: <name> >>>>>             (named loggers only)
    2026-01-15 10:30:00 [日志] message
    <<<<<

Usage::

    log = new_logger("worker-%d", 3)
    log.info("processed %d items", 42)
    log.error("lost connection to", host)
"""

import sys
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .caller import DEFAULT_SKIP, PACKAGE_BOUNDARY, caller_location
from .formatting import format_message
from .levels import SEVERITY_STYLES, Severity, VerbosityLevel
from .settings import VerbositySetting, default_setting

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Serializes writes so blocks from different threads never interleave
_write_lock = threading.Lock()


class LogFacilityError(Exception):
    """Base class for logfacility errors."""


class EmptyBoundaryPathError(LogFacilityError, ValueError):
    """A custom boundary path was empty.

    This is a programming error; nothing in logfacility catches it.
    """


@dataclass(frozen=True)
class Logger:
    """A named logger bound to a boundary path and a verbosity cell.

    Attributes:
        name: Label printed above each message ('' for unlabeled)
        boundary_path: Frames under this prefix are skipped when
            looking for the caller location
        setting: Verbosity cell consulted on every call
    """
    name: str = ''
    boundary_path: str = PACKAGE_BOUNDARY
    setting: VerbositySetting = field(default_factory=default_setting,
                                      compare=False, repr=False)

    def level(self) -> int:
        """Current verbosity threshold as an integer."""
        return int(self.setting.get())

    def info(self, template: Any, *values: Any) -> None:
        level = self.setting.get()
        if level > VerbosityLevel.SILENT:
            self._emit(Severity.INFO, format_message(template, *values),
                       with_location=level > VerbosityLevel.NORMAL)

    def warn(self, template: Any, *values: Any) -> None:
        level = self.setting.get()
        if level > VerbosityLevel.NORMAL:
            self._emit(Severity.WARNING, format_message(template, *values),
                       with_location=level > VerbosityLevel.WARNING)

    def error(self, template: Any, *values: Any) -> None:
        """Always emitted, always with the caller location."""
        self._emit(Severity.ERROR, format_message(template, *values),
                   with_location=True)

    def _emit(self, severity: Severity, message: str, with_location: bool) -> None:
        parts = []
        if with_location:
            # Start above caller_location, _emit and the level method;
            # package-level helpers are skipped by the boundary check
            location = caller_location(self.boundary_path, skip=DEFAULT_SKIP + 1)
            if location:
                parts.append(location + "\n")
        if self.name:
            parts.append(f"Logger: {self.name} >>>>>\n")
        ts = datetime.now().strftime(TIMESTAMP_FORMAT)
        tag = SEVERITY_STYLES[severity].render()
        parts.append(f"{ts} {tag} {message}\n")
        parts.append("<<<<<\n")
        block = "".join(parts)

        with _write_lock:
            stream = sys.stdout
            stream.write(block)
            stream.flush()


# =============================================================================
# Constructors
# =============================================================================

def new_logger_unnamed(boundary_path: str = PACKAGE_BOUNDARY,
                       setting: VerbositySetting = None) -> Logger:
    """Create an unlabeled logger."""
    return Logger('', boundary_path, setting or default_setting())


def new_logger_named(name: str, boundary_path: str = PACKAGE_BOUNDARY,
                     setting: VerbositySetting = None) -> Logger:
    """Create a logger labeled with name, taken literally."""
    return Logger(name, boundary_path, setting or default_setting())


def new_logger_named_format(template: str, *args: Any,
                            boundary_path: str = PACKAGE_BOUNDARY,
                            setting: VerbositySetting = None) -> Logger:
    """Create a logger whose label is format_message(template, *args)."""
    return Logger(format_message(template, *args), boundary_path,
                  setting or default_setting())


def _from_args(args: tuple, boundary_path: str) -> Logger:
    if len(args) == 1 and isinstance(args[0], str):
        return new_logger_named(args[0], boundary_path)
    if len(args) > 1 and isinstance(args[0], str):
        return new_logger_named_format(args[0], *args[1:],
                                       boundary_path=boundary_path)
    # Anything else is accepted and yields an unlabeled logger. Callers
    # may pass whatever they have at hand without guarding the call.
    return new_logger_unnamed(boundary_path)


def new_logger(*args: Any) -> Logger:
    """Create a logger from a flexible argument list.

    new_logger()                 -> unlabeled
    new_logger("worker")         -> named "worker"
    new_logger("job-%d", 7)      -> named "job-7"
    new_logger(42)               -> unlabeled (unrecognized shape)
    """
    return _from_args(args, PACKAGE_BOUNDARY)


def new_logger_with_custom_boundary(boundary_path: str, *args: Any) -> Logger:
    """Like new_logger(), but frames under boundary_path are skipped.

    Lets a wrapping library report its own caller instead of itself.

    Raises:
        EmptyBoundaryPathError: if boundary_path is empty
    """
    if not boundary_path:
        raise EmptyBoundaryPathError("boundary path must not be empty")
    return _from_args(args, boundary_path)
