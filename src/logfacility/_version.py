"""
Version information for logfacility.

This file is the canonical source for version numbers.
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = None  # None, "alpha", "beta", "rc1", etc.

__app_name__ = "logfacility"


def get_base_version():
    """Return the semantic version string (MAJOR.MINOR.PATCH[-PHASE])."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """Return the PEP 440 compliant version for pip/setuptools."""
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)
    return base


__version__ = get_base_version()

# For convenience in imports
VERSION = __version__
PIP_VERSION = get_pip_version()
