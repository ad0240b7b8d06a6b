"""
Caller location lookup.

Walks the interpreter stack to find the first frame that lives outside
a boundary path, so log lines point at the code that called the
logger rather than at the logger itself. Test modules always count as
external, even when they sit under the boundary.
"""

import fnmatch
import inspect
import os

from .levels import LOCATION_COLOR, colorize

# Directory of this package; frames under it are internal by default
PACKAGE_BOUNDARY = os.path.dirname(os.path.abspath(__file__)) + os.sep

# Basename patterns treated as external regardless of location
TEST_SOURCE_PATTERNS = ('test_*.py', '*_test.py', 'conftest.py')

DEFAULT_SKIP = 2
DEFAULT_DEPTH = 13


def is_test_source(path: str) -> bool:
    """Return True if path looks like a test module."""
    name = os.path.basename(path)
    return any(fnmatch.fnmatch(name, pat) for pat in TEST_SOURCE_PATTERNS)


def is_external(path: str, boundary_path: str) -> bool:
    """Return True if a frame in path should be reported as the caller."""
    return not path.startswith(boundary_path) or is_test_source(path)


def caller_location(boundary_path: str, skip: int = DEFAULT_SKIP,
                    depth: int = DEFAULT_DEPTH) -> str:
    """Find the first external frame and render it as a colored path:line.

    Scanning starts ``skip`` frames above this function (frame 0 is
    caller_location itself) and checks at most ``depth`` frames.

    Args:
        boundary_path: Path prefix whose frames are skipped
        skip: Frames to pass over before scanning starts
        depth: Maximum number of frames to inspect

    Returns:
        "\\033[30;1mpath:line\\033[0m", or "" if nothing qualifies
    """
    frame = inspect.currentframe()
    try:
        for _ in range(skip):
            if frame is None:
                return ""
            frame = frame.f_back
        for _ in range(depth):
            if frame is None:
                return ""
            path = frame.f_code.co_filename
            if is_external(path, boundary_path):
                return colorize(f"{path}:{frame.f_lineno}", LOCATION_COLOR)
            frame = frame.f_back
        return ""
    finally:
        # Break the reference cycle through the frame objects
        del frame
