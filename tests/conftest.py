"""Shared test fixtures for logfacility test suite."""

import os
import re
import sys
from pathlib import Path

import pytest

from logfacility import levels as _levels_mod
from logfacility import settings as _settings_mod
from logfacility.levels import VerbosityLevel


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: spawns subprocesses or many threads")


def strip_ansi(text):
    """Remove ANSI color sequences from text."""
    return ANSI_RE.sub("", text)


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_globals():
    """Restore the process-wide verbosity and severity tags after each test."""
    saved_level = _settings_mod.get_verbosity()
    saved_styles = dict(_levels_mod.SEVERITY_STYLES)
    _settings_mod.set_verbosity(VerbosityLevel.NORMAL)
    yield
    _settings_mod.set_verbosity(saved_level)
    _levels_mod.SEVERITY_STYLES.clear()
    _levels_mod.SEVERITY_STYLES.update(saved_styles)


@pytest.fixture
def at_level():
    """Set the process-wide verbosity for the current test."""
    def _set(level):
        _settings_mod.set_verbosity(level)
    return _set


@pytest.fixture
def subprocess_env():
    """Environment that lets a child interpreter import logfacility from src/."""
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = str(SRC_DIR) + (os.pathsep + existing if existing else "")
    env["PYTHONIOENCODING"] = "utf-8"
    return env


@pytest.fixture
def python():
    return sys.executable


@pytest.fixture
def load_module(tmp_path):
    """Write source to tmp_path/<name>.py and import it from that file.

    Returns a callable (name, source) -> module. Modules loaded this way
    are plain (non-test) sources, useful as wrappers under a boundary.
    """
    import importlib.util

    def _load(name, source):
        path = tmp_path / f"{name}.py"
        path.write_text(source, encoding="utf-8")
        spec = importlib.util.spec_from_file_location(f"_lf_{name}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
