"""Tests for diffview exceptions."""

import pytest

from diffview.diff_exceptions import DiffConfigError, DiffError


class TestDiffExceptions:
    """Test the exception hierarchy."""

    def test_base_exception(self):
        """Test DiffError carries its message and an empty details mapping."""
        error = DiffError("something failed")

        assert str(error) == "something failed"
        assert error.error_details == {}

    def test_base_details_are_copied(self):
        """Test that the caller's details dictionary is not shared with the exception."""
        details = {"line": 3}
        error = DiffError("something failed", details)
        details["line"] = 4

        assert error.error_details == {"line": 3}

    def test_config_error_path(self):
        """Test that the configuration file path is kept and mirrored into the details."""
        error = DiffConfigError("bad config", config_path="view.yaml")

        assert error.config_path == "view.yaml"
        assert error.errors == []
        assert error.error_details == {"path": "view.yaml"}

    def test_config_error_problems(self):
        """Test that individual validation problems are kept without a path."""
        error = DiffConfigError("bad config", errors=["'title' must be a string"])

        assert error.config_path is None
        assert error.errors == ["'title' must be a string"]
        assert error.error_details == {"errors": ["'title' must be a string"]}

    def test_config_error_is_diff_error(self):
        """Test that config errors can be caught as DiffError."""
        with pytest.raises(DiffError, match="bad"):
            raise DiffConfigError("bad")
