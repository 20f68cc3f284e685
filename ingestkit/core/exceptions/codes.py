"""Standardized error identifiers for ingestkit."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes attached to every ingestkit exception."""

    GENERAL_ERROR = "GENERAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Option application
    OPTION_SCOPE_VIOLATION = "OPTION_SCOPE_VIOLATION"
    UNKNOWN_SCOPE = "UNKNOWN_SCOPE"
    UNSUPPORTED_MAPPING_KIND = "UNSUPPORTED_MAPPING_KIND"
    INVALID_MAPPING_PAYLOAD = "INVALID_MAPPING_PAYLOAD"
    VALIDATION_POLICY_ENCODING = "VALIDATION_POLICY_ENCODING"


class ErrorOp(str, Enum):
    """Ingestion operation an error was raised for."""

    UNKNOWN = "unknown"
    FILE_INGEST = "file_ingest"
    INGEST_STREAM = "ingest_stream"


class ErrorKind(str, Enum):
    """Classification of an error's cause."""

    CLIENT_ARGS = "client_args"
    INTERNAL = "internal"
    IO = "io"
    TIMEOUT = "timeout"


TRANSIENT_KINDS = frozenset({ErrorKind.IO, ErrorKind.TIMEOUT})


__all__ = ["ErrorCode", "ErrorKind", "ErrorOp", "TRANSIENT_KINDS"]
