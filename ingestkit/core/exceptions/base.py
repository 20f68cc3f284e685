"""Core ingestkit exception classes."""

from typing import Any


class IngestKitError(Exception):
    """Base class for all ingestkit errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """Initialise the error.

        Args:
            message: Error message.
            error_code: Error code string.
            details: Extra details.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(IngestKitError):
    """Raised when ingestkit configuration holds an invalid value."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if setting:
            super_details["setting"] = setting
        super().__init__(message, "CONFIGURATION_ERROR", super_details)
        self.setting = setting
