"""Custom exceptions for diffview.

Parsing never raises: malformed diff input is skipped.  These exceptions only
cover the surrounding configuration layer.
"""

from typing import Any, Dict, List


class DiffError(Exception):
    """Base exception for diffview operations."""

    def __init__(self, message: str, error_details: Dict[str, Any] | None = None):
        super().__init__(message)
        self.error_details: Dict[str, Any] = dict(error_details or {})


class DiffConfigError(DiffError):
    """
    Raised when a diff view configuration cannot be loaded or is invalid.

    The offending file (if the settings came from one) and the individual
    validation problems are kept as attributes and mirrored into
    `error_details` for callers that report errors generically.
    """

    def __init__(self, message: str, config_path: str | None = None, errors: List[str] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            config_path: Path of the configuration file, if there is one
            errors: Individual problems found in the settings
        """
        details: Dict[str, Any] = {}
        if config_path is not None:
            details["path"] = config_path

        if errors:
            details["errors"] = list(errors)

        super().__init__(message, details)
        self.config_path = config_path
        self.errors: List[str] = list(errors or [])
