"""Tests for logfacility.caller — locating the first external frame."""

import os

import pytest

from logfacility.caller import (
    PACKAGE_BOUNDARY, caller_location, is_external, is_test_source,
)
from conftest import strip_ansi


HELPER_SOURCE = '''
from logfacility.caller import caller_location


def where(boundary, depth=13):
    return inner(boundary, depth)


def inner(boundary, depth):
    return caller_location(boundary, skip=1, depth=depth)
'''


@pytest.fixture
def helper(load_module, tmp_path):
    """A non-test module living under tmp_path."""
    module = load_module("wrapper", HELPER_SOURCE)
    module.boundary = str(tmp_path) + os.sep
    return module


def _where():
    return caller_location(PACKAGE_BOUNDARY)


class TestPredicates:
    """Test-source detection and the boundary check."""

    @pytest.mark.parametrize("path", [
        "/x/tests/test_logger.py", "/x/logger_test.py", "/x/conftest.py",
    ])
    def test_test_sources(self, path):
        assert is_test_source(path)

    @pytest.mark.parametrize("path", ["/x/logger.py", "/x/testing.py", "/x/contest.py"])
    def test_non_test_sources(self, path):
        assert not is_test_source(path)

    def test_outside_boundary_is_external(self):
        assert is_external("/app/main.py", "/lib/")

    def test_inside_boundary_is_internal(self):
        assert not is_external("/lib/logger.py", "/lib/")

    def test_test_file_inside_boundary_is_external(self):
        assert is_external("/lib/test_logger.py", "/lib/")


class TestCallerLocation:
    """Stack walking with boundary skipping."""

    def test_reports_calling_test(self):
        location = _where()
        plain = strip_ansi(location)
        path, _, line = plain.rpartition(":")
        assert path == __file__
        assert int(line) > 0

    def test_rendered_in_bold_black(self):
        location = _where()
        assert location.startswith("\033[30;1m")
        assert location.endswith("\033[0m")

    def test_frames_under_boundary_skipped(self, helper):
        location = strip_ansi(helper.where(helper.boundary))
        assert location.startswith(__file__ + ":")

    def test_outside_boundary_reports_helper(self, helper):
        location = strip_ansi(helper.where(PACKAGE_BOUNDARY))
        assert "wrapper.py:" in location

    def test_test_file_under_boundary_is_reported(self):
        tests_dir = os.path.dirname(__file__) + os.sep
        assert strip_ansi(_where_with(tests_dir)).startswith(__file__ + ":")

    def test_no_qualifying_frame_returns_empty(self, helper):
        # Only the helper frame is scanned and it sits under the boundary
        assert helper.where(helper.boundary, depth=1) == ""

    def test_skip_past_stack_returns_empty(self):
        assert caller_location(PACKAGE_BOUNDARY, skip=100000) == ""


def _where_with(boundary):
    return caller_location(boundary)
