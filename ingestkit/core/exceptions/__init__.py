"""Exception handling module."""

from ingestkit.core.exceptions.base import ConfigurationError, IngestKitError
from ingestkit.core.exceptions.codes import ErrorCode, ErrorKind, ErrorOp
from ingestkit.core.exceptions.domain import IngestOptionError
from ingestkit.core.exceptions.messages import ErrorMessageTemplate, format_error_response

__all__ = [
    "IngestKitError",
    "ConfigurationError",
    "IngestOptionError",
    "ErrorCode",
    "ErrorKind",
    "ErrorOp",
    "ErrorMessageTemplate",
    "format_error_response",
]
