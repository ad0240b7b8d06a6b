"""
Verbosity levels, message severities and their terminal styling.

The verbosity axis is a single ordered scale:

    ←── quieter ───────────── default ───────────── louder ──→
    SILENT(1)        NORMAL(2)        WARNING(3)        DEBUG(4)

Gating rules evaluated per call:

    error  always shown, always with caller location
    warn   shown when level > NORMAL,  location when level > WARNING
    info   shown when level > SILENT,  location when level > NORMAL

Severity tags are cosmetic constants. They default to the original
localized labels and can be swapped with set_severity_tag().
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict


class VerbosityLevel(IntEnum):
    """Process-wide verbosity threshold."""
    SILENT = 1      # Errors only
    NORMAL = 2      # Info without location
    WARNING = 3     # Warnings shown, info gets location
    DEBUG = 4       # Everything shown with location


class Severity(Enum):
    """Severity of a single message."""
    ERROR = 'error'
    WARNING = 'warning'
    DEBUG = 'debug'
    INFO = 'info'


class Color(IntEnum):
    """ANSI foreground color codes."""
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37


RESET = "\033[0m"


def colorize(text: str, color: Color) -> str:
    """Wrap text in a bold ANSI color sequence."""
    return f"\033[{int(color)};1m{text}{RESET}"


@dataclass(frozen=True)
class SeverityStyle:
    """Color and bracketed label used for one severity."""
    color: Color
    tag: str

    def render(self) -> str:
        return colorize(f"[{self.tag}]", self.color)


SEVERITY_STYLES: Dict[Severity, SeverityStyle] = {
    Severity.INFO:    SeverityStyle(Color.BLUE, '日志'),
    Severity.DEBUG:   SeverityStyle(Color.GREEN, '调试'),
    Severity.WARNING: SeverityStyle(Color.YELLOW, '警告'),
    Severity.ERROR:   SeverityStyle(Color.RED, '错误'),
}

# Location lines are always rendered in this color
LOCATION_COLOR = Color.BLACK


def set_severity_tag(severity: Severity, tag: str) -> None:
    """Replace the label shown for a severity, keeping its color."""
    current = SEVERITY_STYLES[severity]
    SEVERITY_STYLES[severity] = SeverityStyle(current.color, tag)
