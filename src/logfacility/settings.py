"""
VerbositySetting — the thread-safe verbosity cell.

One cell is owned by the package and shared by every logger that does
not get its own. Changing it affects all of those loggers from that
point forward (last write wins).
"""

import threading
from typing import Union

from .levels import VerbosityLevel


def parse_verbosity(value: Union[VerbosityLevel, int, str]) -> VerbosityLevel:
    """Normalize a level given as enum member, integer or name.

    Names are case-insensitive ('debug', 'Warning'). Integer strings
    such as '3' are accepted too.

    Raises:
        ValueError: if the value does not name a VerbosityLevel
    """
    if isinstance(value, VerbosityLevel):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid verbosity level: {value!r}")
    if isinstance(value, int):
        try:
            return VerbosityLevel(value)
        except ValueError:
            raise ValueError(f"Invalid verbosity level: {value!r}") from None
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip('-').isdigit():
            return parse_verbosity(int(text))
        try:
            return VerbosityLevel[text.upper()]
        except KeyError:
            choices = ', '.join(m.name.lower() for m in VerbosityLevel)
            raise ValueError(
                f"Unknown verbosity level {value!r} (choose from: {choices})"
            ) from None
    raise ValueError(f"Invalid verbosity level: {value!r}")


class VerbositySetting:
    """Mutable holder for a VerbosityLevel, safe to share across threads.

    Usage::

        setting = VerbositySetting()
        setting.set(VerbosityLevel.DEBUG)
        if setting.get() > VerbosityLevel.NORMAL:
            ...
    """

    def __init__(self, level: Union[VerbosityLevel, int, str] = VerbosityLevel.NORMAL):
        self._lock = threading.Lock()
        self._level = parse_verbosity(level)

    def get(self) -> VerbosityLevel:
        with self._lock:
            return self._level

    def set(self, level: Union[VerbosityLevel, int, str]) -> None:
        level = parse_verbosity(level)
        with self._lock:
            self._level = level

    def __repr__(self) -> str:
        return f"VerbositySetting({self.get().name})"


# =============================================================================
# Process-wide default cell
# =============================================================================

_default_setting = VerbositySetting()


def default_setting() -> VerbositySetting:
    """Return the process-wide cell used by loggers that were not given one."""
    return _default_setting


def set_verbosity(level: Union[VerbosityLevel, int, str]) -> None:
    """Set the process-wide verbosity threshold."""
    _default_setting.set(level)


def get_verbosity() -> VerbosityLevel:
    """Return the process-wide verbosity threshold."""
    return _default_setting.get()
